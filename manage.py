"""
This is the main file to run the game.
It imports the run function from the asciiliens app and runs it.
"""

from asciiliens.app import run

if __name__ == "__main__":
    run()
