"""
Entry point for running the validator as a module.

Usage:
    python -m schedule_validator slots config.json --day 1
    python -m schedule_validator validate old.json new.json schedules.json
    python -m schedule_validator convert legacy.json -o config.json
"""

from schedule_validator.cli import main

if __name__ == "__main__":
    main()
