# cmmtree

`cmmtree` provides the abstract syntax tree for C--, a small C-like
teaching language. It also provides two ways of walking that tree:

- **`cmmtree.printer`** writes the tree back out as compact C-- source.
  Every binary and unary expression is fully parenthesised in prefix
  form, for example `(+ a 1)`. `process` also reports the total number
  of nodes visited.
- **`cmmtree.pygen`** generates equivalent Python source. It indents
  blocks, maps `&&`/`||`/`!` to `and`/`or`/`not` and `#arr` to
  `len(arr)`, and turns `++`/`--` into `+= 1`/`-= 1`.

It also includes `cmmtree.strpool`, a small string-interning pool.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Building a tree

`cmmtree.nodes` has one dataclass for each node kind:

- `IntLit`, `BoolLit`
- `BinOp`, `UnOp`
- `ExprStmt`, `If`, `While`, `Return`
- `FunCall`, `FunDef`
- `VarDecl`, `VarDeclItem`, `Param`
- `Scalar`, `ArrayElement`, `ArrayLength`

Each class carries its `AstKind` in the class attribute `kind`.

Sequences are held in a `NodeList` tagged with one of the list kinds of
`AstKind`:

- `ALIST_STMTS`
- `ALIST_PARAMS`
- `ALIST_ARGS`
- `ALIST_TOP_DECL`
- `ALIST_VAR_DECL`

A `NodeList` with any other kind raises `ValueError`. `NodeList.append`
adds an item and returns the list. A list also supports `len()`,
iteration and indexing.

Operators are members of the `BinaryOp` and `UnaryOp` enums. Each member
has a `symbol` attribute that holds its C-- spelling.

```python
from cmmtree.nodes import (
    AstKind, BinaryOp, NodeList, FunDef, Param, Return, BinOp, Scalar, IntLit,
)

params = NodeList(AstKind.ALIST_PARAMS)
params.append(Param("int", "n", False))

body = NodeList(AstKind.ALIST_STMTS)
body.append(Return(BinOp(BinaryOp.PLUS, Scalar("n"), IntLit(1))))

program = NodeList(AstKind.ALIST_TOP_DECL)
program.append(FunDef("int", "inc", params, body))
```

## Printing C-- source

```python
import sys
from cmmtree.printer import SourcePrinter, process

printer = SourcePrinter()
text = printer.render(program)
# "\nint inc(int n) {return (+ n 1);}"
printer.node_count   # nodes visited so far by this printer

total = process(program, sys.stdout)
```

`process` writes the source text first. It then writes a line
`Total AST nodes: N` and returns `N`. With no stream given, it writes
to standard output.

Some details of the output:

- A function definition without a return type is printed as `void`.
- The modulo operator is printed as `%%`.
- A list kind that the printer does not render, such as a bare
  `ALIST_VAR_DECL`, produces a `don't know how to process ...` line in
  the text.

## Generating Python

```python
import sys
from cmmtree.pygen import PythonGenerator, pygen

print(PythonGenerator().generate(program))
# def inc(n):
#     return n + 1

text = pygen(program, sys.stdout)
```

`pygen` writes the generated text and returns it. With no stream given,
it writes to standard output.

Array sizes in declarations are dropped. A declaration item without an
initialiser becomes a bare name.

Nodes the generator cannot translate add nothing to the output. Instead
they write a `Don't know how to process <kind number>` message to the
error stream. That stream is standard error, or the one passed as
`PythonGenerator(errors=...)`.

## Interning names

```python
from cmmtree.strpool import StringPool, hash_string

pool = StringPool()
a = pool.lookup("counter")
b = pool.lookup("count" + "er")
assert a is b
assert "counter" in pool and len(pool) == 1
pool.clear()
```

`hash_string` gives the bucket index (0–1023) that the pool uses for a
name.

## What this package does not do

- There is no parser. C-- source text cannot be read; trees are built
  from the node classes in code.
- There is no command-line tool.