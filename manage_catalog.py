#!/usr/bin/env python3
"""
Catalog Management Script

A simple wrapper script to run catalog management commands.
This script makes it easier to manage the catalog without remembering Flask CLI syntax.
"""

import os
import sys
import subprocess


def run_command(args):
    """Run a flask CLI command and return whether it succeeded."""
    try:
        result = subprocess.run(args, check=True, capture_output=True, text=True)
        print(result.stdout)
        return True
    except subprocess.CalledProcessError as e:
        print(f"Error running command: {e}")
        print(f"Error output: {e.stderr}")
        return False


def print_help():
    print("Catalog Management Commands")
    print("=" * 30)
    print()
    print("seed [--force]     - Populate the database with sample categories,")
    print("                     packages and plugins")
    print("                     Use --force to recreate an existing catalog")
    print()
    print("list               - Display the catalog grouped by category")
    print()
    print("clear [--confirm]  - Remove the whole catalog from the database")
    print("                     Use --confirm to skip confirmation prompt")
    print()
    print("help               - Show this help message")


def main():
    """Main function to handle catalog management."""

    if len(sys.argv) < 2:
        print("Catalog Management Script")
        print("=" * 30)
        print("Usage:")
        print("  python manage_catalog.py seed [--force]")
        print("  python manage_catalog.py list")
        print("  python manage_catalog.py clear [--confirm]")
        print("  python manage_catalog.py help")
        return

    action = sys.argv[1].lower()

    # Set Flask app environment variable
    os.environ["FLASK_APP"] = "main.setup:create_app"

    if action == "seed":
        command = ["flask", "seed-catalog"]
        if "--force" in sys.argv:
            command.append("--force")
        print(f"Running: {' '.join(command)}")
        if run_command(command):
            print("\n✅ Catalog seeded. Run 'python manage_catalog.py list' to see it.")
        else:
            print("\n❌ Failed to seed catalog.")

    elif action == "list":
        if not run_command(["flask", "list-catalog"]):
            print("\n❌ Failed to list catalog.")

    elif action == "clear":
        command = ["flask", "clear-catalog"]
        if "--confirm" in sys.argv:
            command.append("--confirm")
        print(f"Running: {' '.join(command)}")
        if run_command(command):
            print("\n✅ Catalog cleared.")
        else:
            print("\n❌ Failed to clear catalog.")

    elif action == "help":
        print_help()

    else:
        print(f"Unknown action: {action}")
        print("Run 'python manage_catalog.py help' for usage information.")


if __name__ == "__main__":
    main()
