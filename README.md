# macrotoys

Tools for working with C preprocessor style variadic argument lists, and
generators that write the text of the headers such macros need.

An argument list is handled as text, the way the preprocessor sees it.
Arguments are split at top-level commas only. Commas inside parentheses or
inside string and character literals do not split. Whitespace is stripped
from each argument. Text that holds only whitespace has no arguments. At
most 99 arguments can be counted. Functions that count arguments raise
`macrotoys.arguments.ArgumentLimitError` (a `ValueError`) when there are
more. Unbalanced parentheses and unterminated literals raise `ValueError`.

## Installing

```
pip install .
```

## Working with argument lists

```python
from macrotoys.arguments import split_args, args_count, are_args_empty
from macrotoys.transforms import get_last_arg, remove_parenthesis, args_opt
from macrotoys.generators import prepend_append_args, remove_parenthesis_in_list
from macrotoys.splitlist import split_list

split_args("a, (b, c), d")          # ["a", "(b, c)", "d"]
args_count("a, (b, c), d")          # 3
are_args_empty("   ")               # True
get_last_arg("x, y, z")             # "z"
remove_parenthesis("(int a)")       # "int a"
args_opt("", "(shown)")             # "" because the args are empty
args_opt("(x)", "(shown)")          # "shown"
split_list("+", "a, b, c")          # "a + b + c"
prepend_append_args("&", ";", "a, b")       # "& a ;, & b ;"
remove_parenthesis_in_list("(a), b, (c d)") # "a, b, c d"
```

- `remove_parenthesis` removes the parentheses around a leading
  parenthesised group only. `(a) b` becomes `a b`. Text that does not start
  with `(` is returned stripped and otherwise unchanged.
- `args_opt(args, non_empty_expand)` first removes one pair of parentheses
  from both values. It returns the unwrapped `non_empty_expand` only when
  `args` holds any arguments.
- `prepend_append_args` surrounds every argument with the prefix and suffix
  and joins the results with `", "`.
- `split_list` puts the delimiter between each pair of arguments.

## Generating headers

`macrotoys.generators.generate_prepend_append_args()`,
`macrotoys.generators.generate_remove_parenthesis()` and
`macrotoys.splitlist.generate_split_list()` each return the full text of a
header. The headers define `MPT_PREPEND_APPEND_ARGS`,
`MPT_REMOVE_PARENTHESIS` / `MPT_REMOVE_PARENTHESIS_IN_LIST` and
`MPT_SPLIT_LIST` respectively, with expansions for 0 to 99 arguments.

The same headers can be written from the command line. You must choose which
one:

```
macrotoys split-list
macrotoys prepend-append-args -o PrependAppendArgs.h
macrotoys remove-parenthesis --output RemoveParenthesis.h
```

Without `-o`/`--output` the header goes to standard output.

## What it does not do

Only the three headers above can be generated. The package does not write
headers for other macro utilities, such as counting, concatenating or
appending lists. It also does not run a preprocessor on generated or user
text.