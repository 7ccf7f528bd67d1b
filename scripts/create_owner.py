# scripts/create_owner.py
"""
Create an owner account from the command line.

Usage:
     python -m scripts.create_owner <email> <password> <name> [--admin]
"""
import argparse
import logging
import sys

from database import get_session_context
from errors import AppError
from services.owner_service import OwnerService

logger = logging.getLogger("property_manager.scripts")


def parse_args(argv=None) -> argparse.Namespace:
     parser = argparse.ArgumentParser(description="Create a property owner account")
     parser.add_argument("email")
     parser.add_argument("password")
     parser.add_argument("name")
     parser.add_argument("--admin", action="store_true", help="Grant owner management rights")
     return parser.parse_args(argv)


def main(argv=None) -> int:
     logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
     args = parse_args(argv)
     try:
          with get_session_context() as db:
               owner = OwnerService.create_owner(db, args.email, args.password, args.name, is_admin=args.admin)
               print(f"Created owner {owner.id}: {owner.email}{' (admin)' if owner.is_admin else ''}")
     except AppError as e:
          logger.error("Could not create owner: %s", e.message)
          return 1
     return 0


if __name__ == "__main__":
     sys.exit(main())
