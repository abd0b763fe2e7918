#!/usr/bin/env python
# -*- coding: utf-8 -*-

VERSION = "0.1.dev1"
COPYRIGHT = "Copyright © 2026 The randrun authors"
LICENSE = """This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <http://www.gnu.org/licenses/>."""

import argparse
import collections
import io
import locale
import os
import random
import re
import signal
import subprocess
import sys
import traceback

PROG = 'randrun'
ENCODING = locale.getpreferredencoding()
UNLIMITED = sys.maxsize

class UserInputError(ValueError):
    pass


class UserArgumentsError(UserInputError):
    pass


class UserPatternError(UserInputError):
    pass


class UserCommandError(UserInputError):
    pass


class ExceptionWrapper(object):
    def __init__(self, wrapper_exc, *exc_types):
        self.wrapper_exc = wrapper_exc
        self.exc_types = exc_types

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        if (exc_type is None) or not issubclass(exc_type, self.exc_types):
            return False
        if isinstance(self.wrapper_exc, BaseException):
            wrapper = self.wrapper_exc
        else:
            wrapper = self.wrapper_exc(*exc_value.args)
        raise wrapper from exc_value


class PatternSet(object):
    """A list of regular expressions matched against whole strings.

    Patterns use POSIX basic syntax unless `extended` is set, in which case
    they're handed to `re` as they are.  In basic syntax only `\\(`, `\\)`,
    `\\{` and `\\}` are operators; `+`, `?` and `|` are plain characters,
    escaped or not.  `^` and `$` anchor only at the ends of the pattern or
    of a group.
    """
    BASIC_OPERATORS = frozenset('(){}')
    BASIC_LITERALS = frozenset('(){}|+?')
    BRACKET_ESCAPED = frozenset('\\[&~|')
    POSIX_CLASSES = {
        'alnum': 'a-zA-Z0-9',
        'alpha': 'a-zA-Z',
        'blank': ' \\t',
        'cntrl': '\\x00-\\x1f\\x7f',
        'digit': '0-9',
        'graph': '!-~',
        'lower': 'a-z',
        'print': ' -~',
        'punct': '!-/:-@\\[-`{-~',
        'space': ' \\t\\n\\r\\f\\v',
        'upper': 'A-Z',
        'xdigit': '0-9A-Fa-f',
    }

    def __init__(self, patterns=(), ignore_case=False, extended=False):
        flags = re.IGNORECASE if ignore_case else 0
        self.regexps = []
        for pattern in patterns:
            with ExceptionWrapper(UserPatternError(pattern), re.error):
                source = pattern if extended else self.translate_basic(pattern)
                self.regexps.append(re.compile(source, flags))

    def __len__(self):
        return len(self.regexps)

    @classmethod
    def _bracket_expression(cls, pattern, start):
        index = start + 1
        parts = ['[']
        if pattern.startswith('^', index):
            parts.append('^')
            index += 1
        if pattern.startswith(']', index):
            parts.append('\\]')
            index += 1
        while index < len(pattern):
            char = pattern[index]
            if char == ']':
                parts.append(']')
                return ''.join(parts), index + 1
            if pattern.startswith('[:', index):
                end = pattern.find(':]', index + 2)
                if end >= 0:
                    name = pattern[index + 2:end]
                    try:
                        parts.append(cls.POSIX_CLASSES[name])
                    except KeyError:
                        raise re.error("unknown character class {!r}".format(name))
                    index = end + 2
                    continue
            if char in cls.BRACKET_ESCAPED:
                parts.append('\\' + char)
            else:
                parts.append(char)
            index += 1
        # Let re report the unterminated set.
        return pattern[start:], len(pattern)

    @classmethod
    def translate_basic(cls, pattern):
        tokens = []
        index = 0
        length = len(pattern)
        while index < length:
            char = pattern[index]
            if char == '[':
                token, index = cls._bracket_expression(pattern, index)
                tokens.append(token)
                continue
            index += 1
            if (char == '\\') and (index < length):
                escaped = pattern[index]
                index += 1
                if escaped in cls.BASIC_OPERATORS:
                    tokens.append(escaped)
                else:
                    tokens.append(char + escaped)
            elif char in cls.BASIC_LITERALS:
                tokens.append('\\' + char)
            elif char == '^':
                tokens.append('^' if (tokens[-1:] in ([], ['('])) else '\\^')
            elif char == '$':
                at_end = (index == length) or pattern.startswith('\\)', index)
                tokens.append('$' if at_end else '\\$')
            elif (char == '*') and (tokens[-1:] in ([], ['('], ['^'])):
                tokens.append('\\*')
            else:
                tokens.append(char)
        return ''.join(tokens)

    def match(self, arg):
        return any(regexp.fullmatch(arg) for regexp in self.regexps)


class ArgFilter(object):
    def __init__(self, exclude=None, only=None):
        self.exclude = PatternSet() if (exclude is None) else exclude
        self.only = PatternSet() if (only is None) else only

    def keep(self, arg):
        if self.exclude.match(arg):
            return False
        return (not self.only) or self.only.match(arg)

    __call__ = keep

    def filter(self, args):
        return [arg for arg in args if self.keep(arg)]


class DirectoryExpander(object):
    FILES = 'files'
    LEAF_DIRS = 'dirs'

    def __init__(self, mode, exclude=None):
        if mode not in (self.FILES, self.LEAF_DIRS):
            raise ValueError("unknown expansion mode {!r}".format(mode))
        self.mode = mode
        self.exclude = PatternSet() if (exclude is None) else exclude

    @staticmethod
    def _walk_error(error):
        raise error

    def _walk(self, path):
        for dirpath, dirnames, filenames in os.walk(path, onerror=self._walk_error):
            dirnames.sort()
            yield dirpath, dirnames, sorted(filenames)

    def files(self, path):
        return [os.path.join(dirpath, name)
                for dirpath, _, filenames in self._walk(path)
                for name in filenames]

    def leaf_dirs(self, path):
        seen = set()
        for dirpath, dirnames, _ in self._walk(path):
            seen.update(os.path.join(dirpath, name) for name in dirnames)
            if dirnames:
                seen.discard(dirpath)
        return sorted(seen)

    def expand(self, path):
        if not os.path.isdir(path):
            return [path]
        elif self.exclude.match(path):
            return []
        elif self.mode == self.LEAF_DIRS:
            return self.leaf_dirs(path)
        else:
            return self.files(path)


class ArgumentAssembler(object):
    SEPARATOR = '--'

    def __init__(self, arg_filter, expander=None, start=None, times=1,
                 keep_separator=True, has_command=True):
        self.arg_filter = arg_filter
        self.expander = expander
        self.start = PatternSet() if (start is None) else start
        self.times = times
        self.keep_separator = keep_separator
        self.has_command = has_command

    def split(self, arglist):
        arglist = list(arglist)
        if not self.has_command:
            return [], arglist
        elif not arglist:
            raise UserArgumentsError("no command specified")
        try:
            sep_index = arglist.index(self.SEPARATOR, 1)
        except ValueError:
            return arglist[:1], arglist[1:]
        fixed_end = sep_index + 1 if self.keep_separator else sep_index
        return arglist[:fixed_end], arglist[sep_index + 1:]

    def expand(self, args):
        if self.expander is None:
            return list(args)
        expanded = []
        for arg in args:
            expanded.extend(self.expander.expand(arg))
        return expanded

    def skip_to_start(self, args):
        start_index = 0
        if self.start:
            for index, arg in enumerate(args):
                if self.start.match(arg):
                    start_index = index
        return args[start_index:]

    def assemble(self, arglist):
        fixed, variable = self.split(arglist)
        variable = self.expand(variable)
        variable = self.skip_to_start(variable)
        variable = self.arg_filter.filter(variable)
        return fixed, variable * self.times


class Randomizer(object):
    NONE = 'none'
    SHUFFLE = 'shuffle'
    PICK = 'pick'
    ROTATE = 'rotate'
    MODES = frozenset([NONE, SHUFFLE, PICK, ROTATE])

    def __init__(self, mode=SHUFFLE, just_one=False, rng=None, rotate_steps=None):
        if mode not in self.MODES:
            raise ValueError("unknown randomization mode {!r}".format(mode))
        self.mode = mode
        self.just_one = just_one or (mode == self.PICK)
        self.rng = random.Random() if (rng is None) else rng
        self.rotate_steps = rotate_steps

    def randomize(self, args):
        args = list(args)
        if (not args) and (self.just_one or (self.mode == self.ROTATE)):
            raise UserArgumentsError("{} mode requires arguments".format(
                self.ROTATE if (self.mode == self.ROTATE) else 'just-one'))
        if self.mode == self.SHUFFLE:
            self.rng.shuffle(args)
        elif self.mode == self.PICK:
            index = self.rng.randrange(len(args))
            args[0], args[index] = args[index], args[0]
        elif self.mode == self.ROTATE:
            if self.rotate_steps is None:
                steps = self.rng.randrange(len(args))
            else:
                steps = self.rotate_steps % len(args)
            args = args[steps:] + args[:steps]
        if self.just_one:
            del args[1:]
        return args


Batch = collections.namedtuple('Batch', ['argv', 'last'])

class BatchPartitioner(object):
    """Slice the variable arguments into command lines within both limits.

    Every argument costs its encoded length plus one byte for the
    terminator.  The running size of a batch stays strictly under
    `max_size`, except that a batch always takes at least one variable
    argument so the run makes progress.
    """

    def __init__(self, fixed, variable, max_args=UNLIMITED, max_size=UNLIMITED):
        self.fixed = list(fixed)
        self.variable = list(variable)
        self.max_args = max_args
        self.max_size = max_size
        if len(self.fixed) >= self.max_args:
            raise UserArgumentsError(
                "can't obey --max-args={}, initial command is too long ({} words)".
                format(self.max_args, len(self.fixed)))
        self.fixed_size = sum(self.arg_size(arg) for arg in self.fixed)

    @staticmethod
    def arg_size(arg):
        return len(os.fsencode(arg)) + 1

    def next_batch(self, cursor):
        argv = list(self.fixed)
        size = self.fixed_size
        end = len(self.variable)
        while (cursor < end) and (len(argv) < self.max_args):
            arg_size = self.arg_size(self.variable[cursor])
            if (size + arg_size >= self.max_size) and (len(argv) > len(self.fixed)):
                break
            size += arg_size
            argv.append(self.variable[cursor])
            cursor += 1
        return argv, cursor, cursor >= end

    def batches(self, once=False):
        cursor = 0
        while True:
            argv, cursor, exhausted = self.next_batch(cursor)
            last = exhausted or once
            yield Batch(argv, last)
            if last:
                break


def arg_size_budget(margin=0, environ=None, sysconf=os.sysconf, pathconf=os.pathconf):
    if environ is None:
        environ = os.environb
    budget = sysconf('SC_ARG_MAX') - pathconf('/', 'PC_PATH_MAX')
    for key, value in environ.items():
        # Each entry is passed to the command as b'KEY=VALUE\0'.
        budget -= len(key) + len(value) + 2
    budget -= margin
    if budget <= 0:
        raise UserArgumentsError(
            "no room left for arguments with a margin of {}".format(margin))
    return budget


class ProcessOutcome(collections.namedtuple('ProcessOutcome', ['returncode'])):
    __slots__ = ()

    @property
    def success(self):
        return self.returncode == 0

    @property
    def signal(self):
        return -self.returncode if (self.returncode < 0) else None

    @property
    def exit_status(self):
        return self.returncode if (self.returncode >= 0) else None


class BatchRunner(object):
    ACTION_PRINT = 'print'
    ACTION_WAIT = 'fork-and-wait'
    ACTION_REPLACE = 'replace-self'
    SIGNAL_FAILED_EXITCODE = 1
    # Python ignores these at startup; an exec'd command should not.
    RESTORED_SIGNALS = ('SIGPIPE', 'SIGXFSZ')

    Popen = subprocess.Popen
    execvp = staticmethod(os.execvp)
    kill = staticmethod(os.kill)
    getpid = staticmethod(os.getpid)
    set_signal = staticmethod(signal.signal)

    def __init__(self, exit_on_error=False, verbose=False, print_only=False,
                 stdout=None, stderr=None):
        self.exit_on_error = exit_on_error
        self.verbose = verbose or print_only
        self.print_only = print_only
        self.stdout = sys.stdout if (stdout is None) else stdout
        self.stderr = sys.stderr if (stderr is None) else stderr

    def action(self, batch):
        if self.print_only:
            return self.ACTION_PRINT
        elif batch.last:
            return self.ACTION_REPLACE
        else:
            return self.ACTION_WAIT

    def echo(self, argv):
        print(' '.join(argv), file=self.stdout)

    def report(self, message):
        print("{}: {}".format(PROG, message), file=self.stderr)

    def flush(self):
        self.stdout.flush()
        self.stderr.flush()

    def restore_signals(self):
        for name in self.RESTORED_SIGNALS:
            signum = getattr(signal, name, None)
            if signum is not None:
                self.set_signal(signum, signal.SIG_DFL)

    def spawn(self, argv):
        self.flush()
        with ExceptionWrapper(UserCommandError(argv[0]), OSError, ValueError):
            proc = self.Popen(argv)
        return ProcessOutcome(proc.wait())

    def replace(self, argv):
        self.flush()
        self.restore_signals()
        with ExceptionWrapper(UserCommandError(argv[0]), OSError, ValueError):
            self.execvp(argv[0], argv)

    def reraise_signal(self, signum):
        try:
            self.set_signal(signum, signal.SIG_DFL)
        except (OSError, ValueError):
            # SIGKILL and SIGSTOP have no handler to reset.
            pass
        self.kill(self.getpid(), signum)

    def check(self, outcome):
        """Report a failed outcome.

        Returns the exit code the whole run should end with, or None to go
        on with the next batch.
        """
        if outcome.success:
            return None
        elif outcome.signal is None:
            self.report("command exited with {}".format(outcome.exit_status))
            if self.exit_on_error:
                return outcome.exit_status
        else:
            self.report("command exited on signal #{}".format(outcome.signal))
            if self.exit_on_error:
                self.flush()
                self.reraise_signal(outcome.signal)
                return self.SIGNAL_FAILED_EXITCODE
        return None

    def run(self, batches):
        for batch in batches:
            action = self.action(batch)
            if self.verbose:
                self.echo(batch.argv)
            if action == self.ACTION_PRINT:
                continue
            elif action == self.ACTION_REPLACE:
                self.replace(batch.argv)
                break
            exitcode = self.check(self.spawn(batch.argv))
            if exitcode is not None:
                return exitcode
        self.flush()
        return 0


class ExceptHook(object):
    USER_EXITCODE = 1
    ENVIRONMENT_EXITCODE = 1
    INTERNAL_EXITCODE = 1
    INTERRUPT_EXITCODE = 128 + signal.SIGINT
    USER_ERROR_HEADERS = {
        UserInputError: "error",
        UserArgumentsError: "bad arguments",
        UserPatternError: "bad regex {!r}",
        UserCommandError: "error running {!r}",
    }

    def __init__(self, stderr=None):
        self.stderr = sys.stderr if (stderr is None) else stderr
        self.show_tb = False

    @classmethod
    def with_sys_stderr(cls, encoding=None):
        if encoding is None:
            encoding = ENCODING
        stderr = io.open(sys.stderr.fileno(), 'w', encoding=encoding,
                         errors='backslashreplace', closefd=False)
        return cls(stderr)

    @staticmethod
    def _environment_parts(error):
        parts = []
        if error.filename is not None:
            parts.append(os.fsdecode(error.filename))
        parts.append(error.strerror)
        return parts

    def _cause_parts(self, cause):
        while cause.__cause__ is not None:
            cause = cause.__cause__
        if isinstance(cause, OSError) and cause.strerror:
            return self._environment_parts(cause)
        return [str(cause)]

    def _user_parts(self, exc_type, exc_value):
        for error_type in exc_type.__mro__:
            try:
                fmt_s = self.USER_ERROR_HEADERS[error_type]
            except KeyError:
                continue
            break
        message = exc_value.args[0] if exc_value.args else ''
        header = fmt_s.format(message)
        parts = [header]
        if (header == fmt_s) and message:
            parts.append(message)
        if exc_value.__cause__ is not None:
            parts.extend(self._cause_parts(exc_value.__cause__))
        return parts

    def __call__(self, exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.exit(self.INTERRUPT_EXITCODE)
        internal = False
        if issubclass(exc_type, UserInputError):
            parts = self._user_parts(exc_type, exc_value)
            exitcode = self.USER_EXITCODE
        elif issubclass(exc_type, OSError) and exc_value.strerror:
            parts = ["error"] + self._environment_parts(exc_value)
            exitcode = self.ENVIRONMENT_EXITCODE
        elif issubclass(exc_type, MemoryError):
            parts = ["out of memory"]
            exitcode = self.INTERNAL_EXITCODE
        else:
            parts = ["internal " + exc_type.__name__, str(exc_value)]
            exitcode = self.INTERNAL_EXITCODE
            internal = True
        print("{}: {}".format(PROG, ": ".join(parts)), file=self.stderr)
        if self.show_tb:
            traceback.print_exception(exc_type, exc_value, exc_tb, file=self.stderr)
        elif internal:
            print("This is a bug in {}.  Please rerun with `--debug` and report "
                  "the traceback.".format(PROG), file=self.stderr)
        self.stderr.flush()
        sys.exit(exitcode)


class VersionAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        print("{} {}".format(parser.prog, VERSION), COPYRIGHT, LICENSE,
              sep="\n\n")
        parser.exit(0)


def positive_int(s):
    value = int(s)
    if value < 1:
        raise argparse.ArgumentTypeError("{!r} is not a positive number".format(s))
    return value


def nonnegative_int(s):
    value = int(s)
    if value < 0:
        raise argparse.ArgumentTypeError("{!r} is a negative number".format(s))
    return value


class ArgumentParser(argparse.ArgumentParser):
    def __init__(self):
        super(ArgumentParser, self).__init__(
            prog=PROG,
            description="Run a command over a randomized list of arguments, "
            "in as many batches as the command line allows",
        )
        self.add_argument(
            '--version', action=VersionAction, nargs=0,
            help="Display version and license information")
        self.add_argument(
            '--debug', action='store_true',
            help="Show tracebacks for errors")
        self.add_argument(
            '--encoding', default=ENCODING,
            help="Encoding for list files and messages (specify a name Python uses)")

        select_opts = self.add_argument_group("argument selection")
        select_opts.add_argument(
            '--list', '-l', metavar='FILE', action='append', default=[],
            help="Read more arguments from FILE, one per line ('-' is stdin)")
        select_opts.add_argument(
            '--exclude', '-x', metavar='REGEX', action='append', default=[],
            help="Skip arguments matching REGEX")
        select_opts.add_argument(
            '--only', '-o', metavar='REGEX', action='append', default=[],
            help="Only keep arguments matching REGEX")
        select_opts.add_argument(
            '--start', '-s', metavar='REGEX', action='append', default=[],
            help="Start from the last argument matching REGEX")
        select_opts.add_argument(
            '--ignore-case', '-i', action='store_true',
            help="Match all regexes without regard to case")
        select_opts.add_argument(
            '--extended-regexp', '-E', action='store_true',
            help="Use extended (Python re) instead of POSIX basic regex syntax")
        select_opts.add_argument(
            '--recursive', '-r', action='store_true',
            help="Replace directory arguments with the files below them")
        select_opts.add_argument(
            '--leaf-dirs', '-D', action='store_true',
            help="Replace directory arguments with their leaf subdirectories")
        select_opts.add_argument(
            '--times', '-T', metavar='NUM', type=positive_int, default=1,
            help="Repeat the argument list NUM times before randomizing")

        order_opts = self.add_argument_group("ordering")
        order_opts.add_argument(
            '--no-randomize', '-N', dest='randomize', action='store_false',
            help="Keep arguments in order")
        order_opts.add_argument(
            '--just-one', '-1', action='store_true',
            help="Run the command with a single argument")
        order_opts.add_argument(
            '--rotate', '-R', action='store_true',
            help="Rotate arguments by a random amount instead of shuffling")
        order_opts.add_argument(
            '--rotate-by', metavar='NUM', type=nonnegative_int,
            help="Rotate arguments by NUM positions")

        run_opts = self.add_argument_group("running")
        run_opts.add_argument(
            '--max-args', '-n', metavar='NUM', type=positive_int, default=UNLIMITED,
            help="Maximum number of words per command line, command included")
        run_opts.add_argument(
            '--margin', '-m', metavar='BYTES', type=nonnegative_int, default=0,
            help="Leave BYTES free below the system command line limit")
        run_opts.add_argument(
            '--once', '-O', action='store_true',
            help="Only run the first batch")
        run_opts.add_argument(
            '--exit-on-error', '-e', action='store_true',
            help="Stop at the first command that fails")
        run_opts.add_argument(
            '--drop-separator', '-d', dest='keep_separator', action='store_false',
            help="Don't pass '--' between the command flags and its arguments")
        run_opts.add_argument(
            '--verbose', '-v', action='store_true',
            help="Write each command line to stdout before running it")
        run_opts.add_argument(
            '--print-only', '-p', action='store_true',
            help="Print batches of arguments instead of running a command")

        self.add_argument(
            'command', nargs=argparse.REMAINDER, metavar='command',
            help="Command to run, then its fixed flags ending with '--', then arguments")

    def parse_args(self, arglist, namespace=None):
        args = super(ArgumentParser, self).parse_args(list(arglist), namespace)
        if args.print_only:
            args.verbose = True
        if args.rotate_by is not None:
            args.rotate = True
        return args


class Program(object):
    def __init__(self, args):
        self.args = args

    @classmethod
    def from_arglist(cls, arglist, parser_class=ArgumentParser):
        parser = parser_class()
        return cls(parser.parse_args(arglist))

    def pattern_set(self, patterns, pattern_class=PatternSet):
        return pattern_class(patterns, self.args.ignore_case, self.args.extended_regexp)

    def arg_filter(self, filter_class=ArgFilter):
        return filter_class(self.pattern_set(self.args.exclude),
                            self.pattern_set(self.args.only))

    def expander(self, arg_filter, expander_class=DirectoryExpander):
        if self.args.leaf_dirs:
            mode = DirectoryExpander.LEAF_DIRS
        elif self.args.recursive:
            mode = DirectoryExpander.FILES
        else:
            return None
        return expander_class(mode, arg_filter.exclude)

    def assembler(self, assembler_class=ArgumentAssembler):
        arg_filter = self.arg_filter()
        return assembler_class(
            arg_filter, self.expander(arg_filter), self.pattern_set(self.args.start),
            self.args.times, self.args.keep_separator, not self.args.print_only)

    def list_file(self, filename, open_func=io.open):
        if filename == '-':
            source = sys.stdin.fileno()
        elif os.path.isdir(filename):
            raise UserArgumentsError("can't read directory {!r}".format(filename))
        else:
            source = filename
        with ExceptionWrapper(UserArgumentsError("can't read list file"), OSError):
            with open_func(source, encoding=self.args.encoding, errors='surrogateescape',
                           newline='\n', closefd=(source is filename)) as list_file:
                return [line[:-1] if line.endswith('\n') else line
                        for line in list_file]

    def arglist(self):
        arglist = list(self.args.command)
        for filename in self.args.list:
            arglist.extend(self.list_file(filename))
        return arglist

    def order_mode(self):
        if not self.args.randomize:
            return Randomizer.NONE
        elif self.args.rotate:
            return Randomizer.ROTATE
        elif self.args.just_one:
            return Randomizer.PICK
        else:
            return Randomizer.SHUFFLE

    def randomizer(self, rng=None, randomizer_class=Randomizer):
        return randomizer_class(self.order_mode(), self.args.just_one, rng,
                                self.args.rotate_by)

    def max_size(self, budget_func=arg_size_budget):
        if self.args.print_only:
            return UNLIMITED
        return budget_func(self.args.margin)

    def partitioner(self, fixed, variable, partitioner_class=BatchPartitioner):
        return partitioner_class(fixed, variable, self.args.max_args, self.max_size())

    def runner(self, runner_class=BatchRunner):
        return runner_class(self.args.exit_on_error, self.args.verbose,
                            self.args.print_only)

    def main(self):
        assembler = self.assembler()
        fixed, variable = assembler.assemble(self.arglist())
        variable = self.randomizer().randomize(variable)
        partitioner = self.partitioner(fixed, variable)
        return self.runner().run(partitioner.batches(self.args.once))


def main(arglist, program_class=Program, excepthook=ExceptHook):
    program = program_class.from_arglist(arglist)
    hook = excepthook.with_sys_stderr(program.args.encoding)
    hook.show_tb = program.args.debug
    try:
        return program.main()
    except (Exception, KeyboardInterrupt):
        hook(*sys.exc_info())

if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
