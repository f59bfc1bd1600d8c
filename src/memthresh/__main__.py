import sys

from memthresh.cli import PROG, main

sys.exit(main([PROG, *sys.argv[1:]]))
