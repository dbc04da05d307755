# entest

`entest` (entropy test) runs a set of statistical tests on a sequence of
bytes, read from a file, a stream or memory. It measures how random the
data look:

- **Shannon entropy**, in bits per byte, and how far ideal compression could
  shrink the data
- **Chi-square** statistic over the 256 byte values, and the probability
  that random data would exceed it (127 degrees of freedom)
- **Arithmetic mean** of the bytes (127.5 for random data)
- **Monte Carlo estimate of pi**, taken from 6-byte coordinate pairs
- **Serial correlation coefficient** between each byte and the next

Every calculation uses `decimal` arithmetic with 20 significant digits. A
result that cannot be computed comes back as `Decimal('NaN')`: every test on
empty input, the Monte Carlo test on fewer than 6 bytes, and the serial
correlation when all bytes are equal.

## Installation

```
pip install .
```

## Command line

```
entest [options] [FILE]
```

With no `FILE` argument, `entest` reads from standard input:

```
entest data.bin
head -c 1000000 /dev/urandom | entest
```

The report covers all five tests. If the file cannot be opened, an error
is printed to standard error and the exit status is 1.

Options:

| Option          | Meaning                                                   |
|-----------------|-----------------------------------------------------------|
| `-i, --info`    | print the constants `LOG_SQRT_PI` and `I_SQRT_PI` to standard error |
| `-b, --bits`    | accepted, no effect                                       |
| `-c, --counts`  | accepted, no effect                                       |
| `-f, --fold`    | accepted, no effect                                       |
| `-t, --terse`   | accepted, no effect                                       |
| `-u, --usage`   | print the help text and exit                              |

## Library

Run all the tests in one call:

```python
from entest.suite import Entest

result = Entest.test(b"some bytes to examine")
print(result)            # the full human-readable report
print(result.shannon)    # Decimal entropy in bits per byte
print(result.chi, result.chi_prob)
```

`Entest.test` returns an `EntestResult` with the fields `samples`, `chi`,
`chi_prob`, `mc`, `mean`, `sc` and `shannon`.

Data can also be fed in chunks:

```python
from entest.suite import Entest

tester = Entest()
with open("data.bin", "rb") as fh:
    for chunk in iter(lambda: fh.read(8192), b""):
        tester.update(chunk)
result = tester.finalize()
```

To test a random number generator, pass a function that returns exactly the
number of bytes it is asked for; the blocks requested are at most
`chunk_size` bytes and never more than 256 KiB:

```python
import os
from entest.suite import Entest

result = Entest.test_rng(os.urandom, 1_000_000, 65536)
```

A `chunk_size` of zero or less, or a source that returns the wrong number of
bytes, raises `ValueError`.

Each test is also available on its own. All of them share the
`EntropyTest` interface from `entest.base` (`update`, `finalize` and the
class method `test`):

```python
from entest.chisqr import ChiSquareCalculation
from entest.mc import MonteCarloCalculation
from entest.mean import MeanCalculation
from entest.sc import SerialCorrelationCoefficientCalculation
from entest.shannon import ShannonCalculation

data = bytes(range(256)) * 4
MeanCalculation.test(data)                        # Decimal('127.5')
ShannonCalculation.test(data)                     # entropy in bits per byte
chi, prob = ChiSquareCalculation.test_probability(data)
```

The helper functions `chi_statistic`, `probability_chi_sq`, `poz` and `ex`
are in `entest.chisqr`; `dec` and `error_ratio` are in `entest.base`.

To analyse a file or a binary stream from Python, use the helpers in
`entest.cli`:

```python
from entest.cli import analyze_file, analyze_stream

print(analyze_file("data.bin"))
```

## What it does not do

The command always prints the full byte-oriented report. It has no
bit-stream mode, does not print occurrence counts, does not fold letter
case, and has no terse CSV output; the `-b`, `-c`, `-f` and `-t` options
are parsed but ignored.

## Running the tests

```
pip install .[test]
pytest
```