#!/usr/bin/env python3

import sys
import argparse
import logging
from typing import List

from airac import AIRACDateCalculator, AiracError, Cycle

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

class Command:
    """Command-line interface for airac."""

    def __init__(self, args):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
        """
        self.args = args
        self.calculator = AIRACDateCalculator()

    def resolve(self, value: str) -> Cycle:
        """Turn an identifier (digits only) or a date (YYYY-MM-DD) into a cycle."""
        value = value.strip()
        if value.isascii() and value.isdigit():
            return Cycle.parse(value)
        return self.calculator.current_cycle(value)

    def collect(self) -> List[Cycle]:
        """Build the list of cycles requested on the command line."""
        if self.args.year is not None:
            return self.calculator.cycles_in_year(self.args.year)

        if self.args.values:
            cycles = [self.resolve(value) for value in self.args.values]
        else:
            cycles = [self.calculator.current_cycle()]

        if self.args.count:
            start = cycles[-1]
            cycles.extend(start.next(offset) for offset in range(1, self.args.count + 1))
        return cycles

    def run(self) -> int:
        """Print or export the cycles, returns the process exit status."""
        try:
            cycles = self.collect()
        except (AiracError, ValueError) as e:
            logger.error(f'Error resolving cycle: {e}')
            return 1

        if self.args.csv:
            df = AIRACDateCalculator.schedule_dataframe(cycles)
            df.to_csv(self.args.csv, index=False)
            logger.info(f'Saved {len(cycles)} cycles to {self.args.csv}')
            return 0

        for cycle in cycles:
            print(f'{cycle.identifier}  {cycle.effective_date.isoformat()}  {cycle.end_date.isoformat()}')
        return 0

def main():
    parser = argparse.ArgumentParser(description='AIRAC cycle lookup tool')
    parser.add_argument('values', help='AIRAC identifiers (YYoo, digits only) or dates (YYYY-MM-DD), defaults to today', nargs='*')
    parser.add_argument('-n', '--count', help='Also list the N cycles following the last one', type=int, default=0)
    parser.add_argument('-y', '--year', help='List all the cycles of a year', type=int)
    parser.add_argument('--csv', help='CSV output file')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    cmd = Command(args)
    sys.exit(cmd.run())

if __name__ == '__main__':
    main()
