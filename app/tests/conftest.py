import sys
from pathlib import Path

# Add the project root to sys.path so that the "app" package can be found
# structure: <root>/app/tests/conftest.py

current_dir = Path(__file__).parent.absolute()
root_dir = current_dir.parent.parent
sys.path.insert(0, str(root_dir))
