#!/usr/bin/env python3
"""
Personal Website Directory Generator
Main entry point for the build.
"""

from webdir.cli import main

if __name__ == "__main__":
    main()
