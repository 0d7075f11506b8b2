import sys
import argparse

from ezc import Lexer, TokenType, UnexpectedInput, EzcError, open as open_config
from ezc.tools import base_argparser, build_options

argparser = argparse.ArgumentParser(prog='python -m ezc.tools.dump', parents=[base_argparser],
                                    description='Prints the parsed document, or the tokens, of an ezc file')
argparser.add_argument('-t', '--tokens', action='store_true', help='print the token stream instead of the document')


def dump_tokens(data, out, **options):
    for token in Lexer(data, options).lex():
        if token.type is TokenType.EOF:
            break
        out.write('%s\n' % token)


def dump(source_file, out, tokens=False, **options):
    if tokens:
        with open(source_file, 'rb') as f:
            dump_tokens(f.read(), out, source_path=source_file, **options)
    else:
        out.write(open_config(source_file, **options).pretty())


def main(argv=None):
    args = argparser.parse_args(argv)
    out = args.out or sys.stdout
    try:
        dump(args.source_file, out, args.tokens, **build_options(args))
    except UnexpectedInput as e:
        sys.stderr.write('%s\n' % e)
        with open(args.source_file, 'rb') as f:
            sys.stderr.write(e.get_context(f.read()))
        return 1
    except (EzcError, OSError) as e:
        sys.stderr.write('%s\n' % e)
        return 1
    finally:
        if args.out is not None:
            args.out.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
