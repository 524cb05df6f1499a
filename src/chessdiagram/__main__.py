import sys

from chessdiagram.app import main

sys.exit(main())
