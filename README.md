# eulerkit

A library of solvers for classic number-theory and combinatorics puzzles:
sums of multiples, primes and sieves, digit manipulations, lattice and grid
paths, partitions, totients, figurate numbers, poker hands, Roman numerals
and more. Every solver is a plain function that takes the puzzle's inputs
and returns its answer; invalid inputs raise `ValueError`.

## Installation

```
pip install eulerkit
```

The package has no runtime dependencies and supports Python 3.10 and later.

## Examples

```python
from eulerkit.arithmetic import sum_multiples_3_or_5, nth_prime, prime_sum
from eulerkit.words import number_to_words
from eulerkit.roman import minimal_roman
from eulerkit.poker import Card, winner
from eulerkit.partitions import coin_partitions

sum_multiples_3_or_5(10)        # 23
nth_prime(6)                    # 13
prime_sum(10)                   # 17
number_to_words(104382426112)
# "One Hundred Four Billion Three Hundred Eighty Two Million
#  Four Hundred Twenty Six Thousand One Hundred Twelve"
minimal_roman("IIIIIIIII")      # "IX"
coin_partitions(5)              # 7

hand1 = [Card.parse(c) for c in "5H 5C 6S 7S KD".split()]
hand2 = [Card.parse(c) for c in "2C 3S 8S 8D TD".split()]
winner(hand1, hand2)            # 2 (a pair of eights beats a pair of fives)
```

## Modules

- `eulerkit.arithmetic` – multiples of 3 or 5, even Fibonacci sums, largest
  prime factor, smallest multiple, sum-square difference, `nth_prime`, `prime_sum`
- `eulerkit.digits` – palindrome products, first digits of large sums, digit
  sums of powers of two and of factorials
- `eulerkit.grids` – products in series and grids, Pythagorean triplets,
  lattice paths, maximum path sums through a number triangle
- `eulerkit.words` – numbers in English words, name scores, lexicographic permutations
- `eulerkit.dates` – `day_of_week` and `count_sundays`
- `eulerkit.divisors` – amicable numbers, abundant sums, recurring decimal
  cycles, digit powers, coin sums, digit factorials
- `eulerkit.prime_patterns` – quadratic primes, circular and truncatable primes
- `eulerkit.pandigital` – Fibonacci digit counts, pandigital multiples,
  triangle indices, substring divisibility, pentagon numbers
- `eulerkit.pandigital_primes` – pandigital products, pandigital primes,
  prime permutations in arithmetic progression
- `eulerkit.triangles` – primitive Pythagorean triples, perimeter counts,
  numbers that are two polygonal kinds at once
- `eulerkit.digit_tricks` – digit-cancelling fractions, distinct prime factor
  runs, permuted multiples, reverse-and-add palindromes, XOR decryption keys
- `eulerkit.poker` – `Card`, `hand_rank` and `winner`
- `eulerkit.figurate` – four-digit polygonal numbers, cyclic figurate sets,
  magic n-gon rings
- `eulerkit.totients` – `totient_table`, totient maximum and permutation,
  counting reduced fractions
- `eulerkit.chains` – digit factorial chains, singular right triangles
- `eulerkit.partitions` – counting summations, prime summations, partitions
- `eulerkit.passcode` – `derive_passcode` from ordered login attempts
- `eulerkit.paths` – minimal matrix path sums moving two and three ways
- `eulerkit.graphs` – four-way minimal path sums, minimum spanning networks
- `eulerkit.roman` – `roman_value` and `minimal_roman`
- `eulerkit.geometry` – rectangle counts in grids, triangles containing the origin
- `eulerkit.number_sets` – prime power triples, product-sum numbers,
  amicable chains, anagramic squares, ordering of large exponentials
- `eulerkit.modular` – last digits of large powers, optimum special sum sets,
  non-bouncy numbers, block combinations, coloured tile replacements

## What the package does not do

- It has no command-line program: nothing reads puzzle input from standard
  input or prints answers. Parse your input and call the functions directly.
- It has no general primality test for large numbers, and no solvers for
  consecutive prime sums, prime digit-replacement families, prime pair sets,
  spiral prime ratios, continued-fraction periods of square roots, or the
  big-number puzzles on digit sums of powers, square-root convergents, cubic
  permutations and powerful digit counts.

## Running the tests

```
pip install "eulerkit[test]"
pytest
```