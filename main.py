#!/usr/bin/env python3
"""
Main entry point for the RHDH pre-release catalog configurator.
"""

import sys
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from prerelease.cli import main


if __name__ == "__main__":
    sys.exit(main())
