import sys

from dynamic_crud.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
