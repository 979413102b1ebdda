# minilabs

minilabs holds four small programs. Each one shows a classic technique:

- `minilabs.gc`: a toy stack machine with a mark-and-sweep garbage collector.
  It holds integers, doubles and pairs.
- `minilabs.decl_lexer` and `minilabs.decl_parser`: a tokenizer and a
  recursive-descent checker for C-style variable declarations such as
  `const unsigned long int counter;`.
- `minilabs.expr_lexer`, `minilabs.expr_vars` and `minilabs.expr_parser`: a
  tokenizer and two recursive-descent parsers for `;`-separated expressions
  built from `+`, `*` and parentheses. One parser turns each expression into
  assignments over temporary variables `V1` … `V7`. The other only checks the
  grammar.
- `minilabs.accounts`: 100 fixed-size client records kept in a binary file,
  with an interactive menu.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
minilabs-gc                              # run the collector demonstration
minilabs-decl [FILE]                     # check declarations (default: Declaration.txt)
minilabs-expr [FILE] [-r | --recognize]  # translate expressions (default: Test.txt)
minilabs-accounts [DATA [LISTING]]       # account menu (defaults: Data.dat, List.txt)
```

- `minilabs-gc` pushes and pops a fixed sequence of values. Whenever the
  collector runs, it prints the stack and the heap before and after. At the
  end it prints the final stack and heap.
- `minilabs-decl` reads the file and prints each error to standard error.
  An error reads `<line>, Error: <message>`, for example
  `1, Error: missing variable NAME`.
- `minilabs-expr` prints the generated assignments to standard output, with a
  blank line after each statement, and prints the errors to standard error.
  With `--recognize` it only checks the grammar. If an expression needs more
  than seven temporaries, it prints what was generated so far and exits with
  status 1.
- `minilabs-accounts` opens the data file. If the file does not exist yet, it
  creates it with 100 empty slots. The menu offers five options: create an
  account, delete one, add to a balance, write the listing file, and exit.
  Input is read as whitespace-separated words.

## Library use

### Garbage collector

```python
from minilabs.gc import VM, format_object

vm = VM()               # writes "Virtual Machine ready." to stdout (or to `out=`)
vm.push_int(10)
vm.push_double(3.23)
vm.push_pair()          # pops two objects and pushes a pair holding them
print(vm.format_stack())
vm.collect()            # reports the state before and after the sweep
print(vm.format_objects())
```

Before each allocation, the collector runs if the count of objects allocated
since the last collection has reached `max_objects` (5). Only objects
reachable from `vm.stack` survive. `vm.heap` lists the live objects, newest
first. `pop()` on an empty stack raises `IndexError`. Pushing past 256 entries
raises `OverflowError`.

### Declaration checker

```python
from minilabs.decl_parser import DeclarationParser

errors = DeclarationParser("unsigned char c;\nlong double d;\nint ;\n").parse()
# ['3, Error: missing variable NAME']
```

`DeclarationParser` accepts a string, any iterable of lines, or a
`DeclLexer`.

### Expression translator

```python
from minilabs.expr_parser import CodeGenerator, Recognizer

CodeGenerator("a + b * c;\n").statement()
# ['V1 = a', 'V2 = b', 'V3 = c', 'V2 *= V3', 'V1 += V2', '']

Recognizer("a + ;\n").statement()   # returns the list of error messages
```

The lexer skips a character it does not recognise and records a message for
it. Both parsers collect these messages in `errors`, together with their own.
The temporary names come from a `VariablePool`:

```python
from minilabs.expr_vars import VariablePool, TooManyVariablesError

pool = VariablePool()
name = pool.acquire()   # 'V1'
pool.release(name)
```

`acquire()` raises `TooManyVariablesError` when all names are in use.
`release()` on an empty pool raises `IndexError`.

### Account store

```python
from minilabs.accounts import AccountStore

with AccountStore("Data.dat") as store:
    store.create(7, "Ada", "Lovelace")
    store.deposit(7, 12.5)
    print(store.get(7))            # ClientRecord(id=7, name='Ada', ...)
    for record in store:           # every used slot, in account order
        print(record.id, record.balance)
    store.write_listing("List.txt")
    store.delete(7)
```

Account numbers run from 1 to 100. Any other number raises `ValueError`. So
does creating an account in a slot that is already used, or depositing into
an empty slot. `create` keeps at most 15 characters of the name and of the
surname. The listing file is a tab-separated table with the columns Account,
Name, Surname and Balance, with the balance shown to three decimals.

## What it does not do

- The declaration and expression parsers report errors as text. They do not
  build a syntax tree, and they do not evaluate anything.
- The account store handles one file at a time. It has no locking. It only
  adds to a balance; it has no withdrawals and no transaction history.