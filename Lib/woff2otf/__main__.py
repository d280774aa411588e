import sys
from woff2otf.cli import main


if __name__ == "__main__":
	sys.exit(main())
