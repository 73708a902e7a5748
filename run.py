#!/usr/bin/env python3
"""
GRAZE CATCHER Launcher
=======================
Run this script to start the game.
"""

from graze_catcher.main import main

if __name__ == "__main__":
    main()
