#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Wordle player.

Usage:

    wordlebot [options]                  interactive play
    wordlebot [options] solve WORD ...   show how the solver finds WORD
    wordlebot [options] benchmark        solve all answer words, statistics
    wordlebot [options] first            rank opening words

Options select the word lists (bundled dataset or files), the attempt
budget and a fixed first word; see --help.
"""
import argparse
import sys

from .benchmark import BenchmarkRunner
from .dictionary import Dictionary
from .errors import WordleError, EmptyCandidateSet
from .feedback import score, color_str
from .selector import GuessSelector, RESTRICT_BELOW
from .session import SolverSession, SessionState, MAX_TRIES
from .words import Feedback, check_word


def _show_words(words, num=7):
    return f'{", ".join(words[:num])}{", ..." if len(words) > num else "."}'


def play_ai(selector, first_word=None, max_tries=MAX_TRIES, input_func=None):
    """Interactive play against human or website.

    input_func: function prompt -> str, default input().

    Return the SolverSession.
    """
    if input_func is None:
        input_func = input
    session = SolverSession(selector, max_tries=max_tries, first_word=first_word)
    print('Example response: .a.T. -> a has wrong position, T is correct.')
    while session.is_active:
        tword = session.next_guess()
        # get/parse user input
        while True:
            try:
                r = input_func(f'Try "{tword}", what is the response? >')
            except EOFError:
                print('  Aborted.')
                return session
            if r.strip() == tword:
                print(f'Did you mean {tword.upper()!r} rather than {tword!r}?')
                continue
            try:
                feedback = Feedback.parse(tword, r)
            except WordleError as e:
                print(f'  {e} Try again.')
                continue
            break

        try:
            state = session.apply_turn(tword, feedback)
        except EmptyCandidateSet:
            print('  No match! Giving up!')
            return session
        if state == SessionState.SOLVED:
            print('  Gotcha!')
        elif state == SessionState.FAILED:
            print('  Game over')
        else:
            cands = session.candidates
            print(f'  Remaining: {len(cands)}: {_show_words(cands)}')
    return session


def solve_verbose(selector, secret, first_word=None, max_tries=MAX_TRIES):
    """Solve secret, printing every step. Return SolverSession."""
    session = SolverSession(selector, max_tries=max_tries, first_word=first_word)
    print(f'----- {secret} -------')
    print(f'Trying to solve in {max_tries} rounds')
    while session.is_active:
        print(f'Step {len(session.history) + 1}')
        print(f'   {len(session.cand_idx)} remaining words')
        tword = session.next_guess()
        feedback = score(tword, secret)
        print(f'   next guess {color_str(tword, feedback)} {feedback.pattern(tword)}')
        session.apply_turn(tword, feedback)
    if session.state == SessionState.SOLVED:
        print(f'Solved after {len(session.history)} steps')
    else:
        print(f'Failed to solve after {max_tries} rounds')
        print(f'Remaining words: {_show_words(session.candidates, 20)}')
    print(session.summary(secret))
    print()
    return session


def rank_first_words(selector, num=10):
    """Print the num best opening words."""
    ranks = selector.rank(selector.dictionary.all_candidates(), num=num)
    print('First word rankings.\n'
          f'(Selected from {len(selector.dictionary.guess_pool)} against'
          f' dictionary {len(selector.dictionary)})\n'
          'Rank Word   Worst  Expected')
    for i, gs in enumerate(ranks):
        flag = '' if gs.is_candidate else ' (not an answer)'
        print(f'{i+1:4d} {gs.word:<6s} {gs.worst:5d}  {gs.expected:8.2f}{flag}')
    return ranks


def load_dictionary(args):
    """Return Dictionary for command line arguments."""
    if args.answers is not None:
        return Dictionary.from_files(args.answers, args.guesses)
    dictionary = Dictionary.from_dataset(args.dataset)
    if args.guesses is not None:
        extra = Dictionary.from_files(args.guesses)
        dictionary = Dictionary(
            dictionary.answers, extra.answers, name=f'{args.dataset}+{extra.name}'
            )
    return dictionary


def build_parser():
    parser = argparse.ArgumentParser(
        prog='wordlebot',
        description='Wordle solver: suggest guesses, solve words, benchmark.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        )
    parser.add_argument(
        '-d', '--dataset', default='en', choices=Dictionary.get_datasets(),
        help='Bundled word list'
        )
    parser.add_argument(
        '-a', '--answers', default=None,
        help='File with possible answers, one per line (overrides --dataset)'
        )
    parser.add_argument(
        '-g', '--guesses', default=None,
        help='File with allowed guesses, one per line (default: answers only)'
        )
    parser.add_argument(
        '-m', '--max-tries', type=int, default=MAX_TRIES,
        help='Maximal number of rounds'
        )
    parser.add_argument(
        '-f', '--first', default=None,
        help='Fixed first word (default: computed)'
        )
    parser.add_argument(
        '--restrict-below', type=int, default=RESTRICT_BELOW,
        help='Only try candidate words when fewer candidates than this remain'
        )
    parser.add_argument(
        '-j', '--processes', type=int, default=None,
        help='Number of worker processes (default: all cores; 1: no pool)'
        )
    sub = parser.add_subparsers(dest='command')
    p = sub.add_parser('solve', help='Show how the solver finds the words')
    p.add_argument('words', nargs='+', help='The words to solve')
    p = sub.add_parser('benchmark', help='Benchmark against all answer words')
    p.add_argument('--limit', type=int, default=None, help='Only the first N answers')
    p.add_argument('--plot', default=None, help='Save histogram plot to this file')
    p = sub.add_parser('first', help='Rank opening words')
    p.add_argument('-n', '--num', type=int, default=10, help='Number of words to show')
    sub.add_parser('play', help='Interactive play (default)')
    return parser


def main(argv=None):
    """Command line entry point; return exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_tries < 1:
        parser.error(f'--max-tries must be positive, got {args.max_tries}')

    try:
        dictionary = load_dictionary(args)
        first_word = None if args.first is None else check_word(args.first)
    except (OSError, WordleError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    print(f'Initializing solver for {dictionary!r}. This might take a while...')
    selector = GuessSelector(
        dictionary, restrict_below=args.restrict_below, processes=args.processes
        )

    if args.command == 'solve':
        status = 0
        for word in args.words:
            try:
                word = check_word(word)
            except WordleError as e:
                print(f'Error: {e}', file=sys.stderr)
                status = 1
                continue
            if dictionary.answer_index(word) is None:
                print(f'Error: {word!r} is not in the answer list', file=sys.stderr)
                status = 1
                continue
            solve_verbose(selector, word, first_word, args.max_tries)
        return status

    if args.command == 'benchmark':
        secrets = dictionary.answers
        if args.limit is not None:
            secrets = secrets[:args.limit]
        runner = BenchmarkRunner(
            selector, max_tries=args.max_tries, first_word=first_word,
            processes=args.processes
            )
        report = runner.run(secrets)
        print(report.format())
        if args.plot is not None:
            report.plot(args.plot)
            print(f'Wrote {args.plot}')
        return 0

    if args.command == 'first':
        rank_first_words(selector, num=args.num)
        return 0

    print('Ctrl-D/Ctrl-Z to abort input; Ctrl-C to end.')
    try:
        while True:
            session = play_ai(selector, first_word, args.max_tries)
            if session.is_active:
                break
            print()
    except KeyboardInterrupt:
        print()
    return 0

