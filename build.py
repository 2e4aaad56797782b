import PyInstaller.__main__
import sys
from pathlib import Path

# Define project root
PROJECT_ROOT = Path(__file__).parent

def build():
    print("Building PushToFolders executable...")

    # Common arguments
    args = [
        'main.py',                        # Entry point
        '--name=PushToFolders',           # Name of the executable
        '--onefile',                      # Single file for "Send To" shortcuts
        '--clean',                        # Clean cache
        '--noconfirm',                    # Replace output directory without asking

        # Paths
        f'--paths={PROJECT_ROOT}',

        # Hidden imports (often missed by PyInstaller analysis)
        '--hidden-import=dotenv',
        '--hidden-import=pushtofolders',
    ]

    # Run PyInstaller
    PyInstaller.__main__.run(args)
    print("Build complete. Check the 'dist' folder.")

if __name__ == "__main__":
    build()
