# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

"""
Command-line front end: prints the Porter stem of each word given on the
command line, in a file, or on standard input.
"""

import logging
import sys
from optparse import OptionParser

from porterstem import versionstring
from porterstem.stemmer import Stemmer
from porterstem.tracing import LoggingTracer


logger = logging.getLogger(__name__)


def make_parser() -> OptionParser:
    p = OptionParser(usage="%prog [options] [WORD ...]",
                     version="%prog " + versionstring())
    p.add_option("-f", "--file", dest="infile", metavar="FILE",
                 help="Read whitespace-separated words from FILE "
                      "(use - for standard input)",
                 default=None)
    p.add_option("-q", "--quiet", dest="quiet", action="store_true",
                 help="Print only the stems, not the original words",
                 default=False)
    p.add_option("-t", "--trace", dest="trace", action="store_true",
                 help="Print each phase of the stemmer to standard error",
                 default=False)
    p.add_option("-v", "--verbose", dest="verbose", action="store_true",
                 help="Enable debug logging",
                 default=False)
    return p


def _read_words(stream):
    for line in stream:
        for word in line.split():
            yield word


def main(argv=None, stdout=None, stderr=None, stdin=None) -> int:
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    stdin = stdin or sys.stdin

    parser = make_parser()
    options, args = parser.parse_args(argv)

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=stderr)

    tracer = None
    if options.trace:
        tracelog = logging.getLogger("porterstem.trace")
        tracelog.propagate = False
        handler = logging.StreamHandler(stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        tracelog.handlers[:] = [handler]
        tracelog.setLevel(logging.INFO)
        tracer = LoggingTracer(tracelog, level=logging.INFO,
                               changes_only=True)

    stemmer = Stemmer(tracer=tracer)

    if args:
        words = iter(args)
    elif options.infile and options.infile != "-":
        try:
            infile = open(options.infile, encoding="utf-8")
        except OSError as e:
            parser.error("can't read %s: %s" % (options.infile, e))
        with infile:
            words = list(_read_words(infile))
    else:
        words = _read_words(stdin)

    count = 0
    for word in words:
        if options.trace:
            print("%s:" % word, file=stderr)
        result = stemmer.stem(word)
        if options.quiet:
            print(result, file=stdout)
        else:
            print("%s\t%s" % (word, result), file=stdout)
        count += 1

    logger.debug("Stemmed %d words", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
