import sys

from libfloatdecode.main import main

sys.exit(main())
