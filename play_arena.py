#!/usr/bin/env python3
"""
Main script to launch Paddle Arena with PyGame graphical interface
"""

import sys

from paddle_arena.gui.game_app import main

if __name__ == "__main__":
    print("=== PADDLE ARENA ===")
    print()
    print("CONTROLS:")
    print("  Drag (mouse or touch): move the paddle under the pointer")
    print("  R: Reset")
    print("  ESC: Quit")
    print()

    sys.exit(main())
