from __future__ import print_function
import argparse
import logging
import readline  # noqa: F401 -- line editing for input()

import minforth

PROMPT = ''
BANNER = 'Here will be forth'


def forth_repl():
    print(BANNER)
    print('Type "BYE" or input an end of file (Ctrl+D) to quit.')

    m = minforth.Machine()

    cmd = input(PROMPT)
    while cmd.strip().upper() != 'BYE':
        status = m.eval(cmd)
        print(' '.join(str(value) for value in m.data_stack) + status)
        cmd = input(PROMPT)


def main():
    parser = argparse.ArgumentParser(description='A small Forth evaluator.')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log definitions as they are made')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        forth_repl()
    except EOFError:
        pass  # perfectly acceptable


if __name__ == '__main__':
    main()
