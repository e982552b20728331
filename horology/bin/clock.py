"""
# Repeatedly print the current UTC date and time every 64 milliseconds.

# Carriage returns will be used to overwrite previous displays.
"""
import sys
import time
from .. import library

def print_timestamp(now=library.now, interval=0.064):
	try:
		while not None:
			sys.stdout.write("   " + now().format() + "\r")
			sys.stdout.flush()
			time.sleep(interval)
	except KeyboardInterrupt:
		sys.stdout.write("\r\n")
		sys.exit(0)

if __name__ == '__main__':
	print_timestamp()
