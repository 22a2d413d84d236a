import sys

from hello_k3s.server import main

if __name__ == "__main__":
    sys.exit(main())
