import sys

from . import run_with_args

sys.exit(run_with_args())
