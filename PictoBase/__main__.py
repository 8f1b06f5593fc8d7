import sys

from PictoBase.interface.cli import main

sys.exit(main())
