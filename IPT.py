# IPT.py
# Interactive IPT/EPUSP dosage in the terminal.
# Run:
#   pip install -e .
#   python IPT.py

import sys

from ipt.cli import main

if __name__ == "__main__":
    sys.exit(main())
