"""
Run the index builder without installing the package
"""
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

if __name__ == "__main__":
    from screener_scraper.index_builder import cli

    sys.exit(cli())
