import argparse
import sys
from core.expiration_reporter import run_report

def main():
    parser = argparse.ArgumentParser(
        description="Prints the next 20 options expiration Fridays with days to expiration. "
                    "[W] marks weekly expirations, [TODAY] marks an expiration falling on today."
    )
    parser.parse_args()

    sys.exit(run_report())

if __name__ == "__main__":
    main()
