#!/usr/bin/env python3
"""
Script to check the battle records database.
Shows database info, one channel's records, or a single player's record.
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from battle_stats.database import DatabaseManager
from battle_stats.utils import calculate_win_rate, format_win_rate

USAGE = """Usage:
  python management/check_database.py                          # Show database info
  python management/check_database.py channel <channel_id>     # Show a channel's records
  python management/check_database.py player <channel_id> <name>  # Show one record"""


def show_channel_records(db, channel_id):
    """Show every record in a channel."""
    records = db.records.list_all(channel_id)

    if not records:
        print(f"📭 No records found in channel {channel_id}")
        return

    print(f"📊 Records in channel {channel_id} ({len(records)} players):")
    print("-" * 70)
    for record in records:
        rate = format_win_rate(calculate_win_rate(record.win, record.lose))
        print(f"  {record.player_name:20s} W:{record.win:4d}  L:{record.lose:4d}  G:{record.games:4d}  {rate:>5s}%")


def show_player_detail(db, channel_id, name):
    """Show one player's record."""
    record = db.records.fetch(channel_id, name)

    if not record:
        print(f"❌ Player '{name}' not found in channel {channel_id}")
        return

    print(f"📊 {record.player_name} (channel {record.channel_id})")
    print("=" * 50)
    print(f"Wins:     {record.win}")
    print(f"Losses:   {record.lose}")
    print(f"Games:    {record.games}")
    print(f"Win rate: {format_win_rate(calculate_win_rate(record.win, record.lose))}%")


def show_database_info(db):
    """Show database information."""
    info = db.get_database_info()

    if 'error' in info:
        print(f"❌ Could not read database info: {info['error']}")
        return

    print("🗃️ Database Information:")
    print(f"   Type: {info['database_type']}")
    print(f"   Records: {info['record_count']}")
    print(f"   Channels: {info['channel_count']}")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    db = DatabaseManager()

    try:
        if not argv:
            show_database_info(db)
            return 0

        command = argv[0].lower()
        if command == "channel" and len(argv) == 2:
            show_channel_records(db, argv[1])
        elif command == "player" and len(argv) > 2:
            show_player_detail(db, argv[1], " ".join(argv[2:]))
        elif command == "info":
            show_database_info(db)
        else:
            print("❌ Invalid command")
            print(USAGE)
            return 1
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
