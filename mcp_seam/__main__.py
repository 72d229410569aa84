import sys

from mcp_seam.cli import main

sys.exit(main())
