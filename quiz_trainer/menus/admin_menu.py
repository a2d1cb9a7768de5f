ADMIN_MENU_TEXT = (
    "⚠ Administrator Mode Active ⚠\n\n"
    "1. ➕ Add New Question\n"
    "2. ➖ Remove Question\n"
    "3. 📁 Add New Module\n"
    "4. 🗑️  Remove Module\n"
    "5. 👥 Manage Users\n"
    "6. 📋 List All Questions\n"
    "7. 🔑 Change Admin Password\n"
    "8. ⬅️  Back to Main Menu"
)

MANAGE_USERS_TEXT = (
    "1. Delete User\n"
    "2. Back"
)
