"""Utility script to store a notification for a user from the command line."""

from __future__ import annotations

import argparse
import json

from notification_center.application.notifications import NotificationManager
from notification_center.config import get_settings
from notification_center.domain.exceptions import PersistenceError
from notification_center.infrastructure.database import SessionLocal, initialize_database
from notification_center.infrastructure.repositories import NotificationRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for notification creation."""

    parser = argparse.ArgumentParser(
        description="Create a notification for a user of the notification center.",
    )
    parser.add_argument("--user-id", type=int, required=True, help="Recipient user id")
    parser.add_argument("--type", required=True, help="Notification type")
    parser.add_argument(
        "--data",
        default="{}",
        help="JSON payload stored with the notification (default: {})",
    )
    return parser.parse_args()


def main() -> None:
    """Create a notification using the provided command line arguments."""

    args = parse_args()

    try:
        data = json.loads(args.data)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"--data is not valid JSON: {exc}") from exc

    initialize_database()

    session = SessionLocal()
    try:
        manager = NotificationManager(
            lambda owner: NotificationRepository(session, owner=owner),
            types=get_settings().notification_types,
        )
        notification = manager.create(args.type, data, user_id=args.user_id)
    except PersistenceError as exc:
        raise SystemExit(f"Could not store the notification: {exc}") from exc
    else:
        print(
            "Notification created:\n"
            f"  ID: {notification.id}\n"
            f"  User: {notification.user_id}\n"
            f"  Type: {notification.type}\n"
            f"  Text: {notification.compiled_text}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
