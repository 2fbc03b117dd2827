# Library imports
from spaceGroups.structure import SpaceGroupQuotient, make_orbit
from spaceGroups.util.tracing import TraceLevel, TRACER
# Standard Library Imports
import argparse
from pathlib import Path

_MODES = {  "silent"  : TraceLevel.NONE,
            "echo"    : TraceLevel.ECHO,
            "trace"   : TraceLevel.EVENT,
            "verbose" : TraceLevel.ALL,
            "debug"   : TraceLevel.DEBUG }

def build_parser():
    parser = argparse.ArgumentParser(prog="spaceGroups",
                description="Report the order, conjugacy classes and Bragg peak orbits of a space group.")
    parser.add_argument("--file","-f", type=str, required=True,
                        help="Symmetry group file (dim/size header followed by operations).")
    parser.add_argument("--wave","-k", type=int, nargs="+", action="append", default=[],
                        help="Wave vector to classify. May be repeated.")
    parser.add_argument("--classes","-c", action="store_true",
                        help="Also report conjugacy class sizes.")
    trace_group = parser.add_mutually_exclusive_group()
    trace_group.add_argument("--mode","-m",choices=list(_MODES))
    trace_group.add_argument("--silent","-s",action='store_true')
    trace_group.add_argument("--echo","-e", action='store_true')
    trace_group.add_argument("--trace","-t", action='store_true')
    trace_group.add_argument("--verbose","-v", action='store_true')
    trace_group.add_argument("--debug","-d", action='store_true')
    return parser

def trace_level(args):
    """ Determine Trace detail level from mutually exclusive option set """
    if args.mode is not None:
        return _MODES[args.mode.lower()]
    for flag in ["silent","echo","trace","verbose","debug"]:
        if getattr(args, flag):
            return _MODES[flag]
    return TraceLevel.ECHO

def main(argv=None):
    args = build_parser().parse_args(argv)
    TRACER.filterLevel = trace_level(args)
    filepath = Path(args.file)
    TRACER.trace("Reading group file {}.", TraceLevel.ECHO, filepath)
    group = SpaceGroupQuotient.fromFile(filepath)
    print(group)
    if args.classes:
        TRACER.trace("Computing conjugacy classes.", TraceLevel.EVENT)
        sizes = [len(c) for c in group.conjugacyClasses]
        print("conjugacy classes: {}".format(sizes))
    for k in args.wave:
        TRACER.trace("Classifying wave vector {}.", TraceLevel.EVENT, k)
        orbit = make_orbit(k, group)
        print("{} : {}".format(k, orbit))
        if TRACER.passesFilter(TraceLevel.RESULT):
            for item in orbit:
                TRACER.trace("{}", TraceLevel.RESULT, item)
    return 0

if __name__=="__main__":
    main()
