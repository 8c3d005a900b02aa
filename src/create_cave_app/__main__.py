import sys

from create_cave_app.cli import main

sys.exit(main())
