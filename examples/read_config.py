#
# This example shows how to read an ezc file, look up values, and report errors.
#
# Run it from this directory: python read_config.py [file]
#

import sys

import ezc


def main(filename='example.ezc'):
    try:
        config = ezc.open(filename)
    except ezc.UnexpectedInput as e:
        print(e)
        with open(filename, 'rb') as f:
            print(e.get_context(f.read()))
        return 1

    print(config.pretty())

    port = config.get('port').value
    limits = config.get_category('limits')
    print('Listening on port %d with at most %d connections' % (port, limits.get('max_connections').value))
    print('Timeouts:', limits.get('timeouts').to_python())
    return 0


if __name__ == '__main__':
    sys.exit(main(*sys.argv[1:]))
