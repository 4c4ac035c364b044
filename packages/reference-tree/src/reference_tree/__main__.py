import sys

from reference_tree.update_tree import main

sys.exit(main())
