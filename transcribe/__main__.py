import sys

from transcribe.main import main

sys.exit(main())
