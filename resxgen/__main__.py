# SPDX-License-Identifier: MIT
import sys

from resxgen.cli import main

sys.exit(main())
