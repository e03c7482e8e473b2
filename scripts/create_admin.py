"""
Create Admin Account Script

Provisions an administrator. Admin addresses are rejected by the public
registration endpoints, so this is the only way to create one.

Usage:
    python scripts/create_admin.py ops@admin.local [--first-name Site] [--surname Admin]
"""
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import getpass

from src.realestate_directory.db.session import create_all_tables, get_db_session
from src.realestate_directory.exceptions import DuplicateEmailError
from src.realestate_directory.services.registration_service import RegistrationService
from src.realestate_directory.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Create an administrator account")
    parser.add_argument("email", help="Address in the admin domain")
    parser.add_argument("--first-name", default="Site")
    parser.add_argument("--surname", default="Admin")
    args = parser.parse_args()

    setup_logging()
    create_all_tables()
    password = getpass.getpass("Password: ")

    try:
        with get_db_session() as session:
            admin = RegistrationService(session).provision_admin(
                args.email, password, first_name=args.first_name, surname=args.surname
            )
    except (ValueError, DuplicateEmailError) as e:
        logger.error("create_admin_failed", error=str(e))
        return 1

    print(f"Created admin {admin.email} ({admin.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
