# /shostspec/__main__.py
import sys

from shostspec.adapters.cli.main import main

sys.exit(main())
