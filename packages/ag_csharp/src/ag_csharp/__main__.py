import sys

from ag_csharp.cli import main

sys.exit(main())
