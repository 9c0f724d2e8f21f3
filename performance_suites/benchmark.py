import timeit

from ropes import Rope
from ropes._testutils import left_chain


def skewed(chunks):
    return left_chain(chunks)


def balanced(chunks):
    return left_chain(chunks).balance()


def flat(chunks):
    return ''.join(chunks)


implementations = (
    ('skewed', skewed, Rope.char_at),
    ('balanced', balanced, Rope.char_at),
    ('str', flat, str.__getitem__),
)


tests = (
    (
        "Build from",
        "make(chunks)",
        "chunks = ['abcd'] * data_size",
    ),

    (
        "Random char_at on",
        "for i in indices: char_at(r, i)",
        """
chunks = ['abcd'] * data_size
r = make(chunks)

import random
random.seed(42)
indices = [random.randrange(len(r)) for _ in range(1000)]
        """,
    ),

    (
        "Balance",
        "r.balance()",
        """
chunks = ['abcd'] * data_size
r = left_chain(chunks)
        """,
    ),

)
for test_name, test, test_setup in tests:
    for dname, dsize in (('small', 10), ('medium', 2000), ('large', 20_000)):
        print(test_name, dname, ':')

        for iname, make, char_at in implementations:
            if test_name == "Balance" and iname != 'skewed':
                continue
            timer = timeit.Timer(
                test,
                setup=test_setup,
                globals={
                    'make': make,
                    'char_at': char_at,
                    'left_chain': left_chain,
                    'data_name': dname,
                    'data_size': dsize,
                },
            )
            loop_count, seconds = timer.autorange()
            print('\t%s:\t%.2g' % (iname, seconds / loop_count))
