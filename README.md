# nmtshell

A small interactive shell that works on an in-memory tree of folders and
files. Nothing touches your real disk. Folders and files exist only while
the shell runs, and files have names but no content.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Running

    nmtshell

The prompt shows the current path, starting at `~`:

    ~$ mkdir projects
    ~$ cd projects
    ~/projects$ touch notes
    ~/projects$ cd ..
    ~$ tree

The shell stops on `exit` or at the end of standard input. `nmtshell --help`
prints a short usage message.

## Commands

| Command        | What it does                                              |
|----------------|-----------------------------------------------------------|
| `ls`           | list the current folder and what it directly holds        |
| `tree`         | list the current folder and everything below it           |
| `pwd`          | print the current path                                    |
| `cd NAME`      | enter a subfolder; `cd ..` goes up, `cd ~` goes home      |
| `mkdir NAME`   | create a folder                                           |
| `touch NAME`   | create a file                                             |
| `rm NAME`      | remove a file or folder                                   |
| `mv NAME`      | remove an entry and recreate it as a file                 |
| `clear`        | clear the terminal                                        |
| `neofetch`     | show the operating system, host name and user name        |
| `test`         | print which platform the shell is running on              |
| `exit`         | leave the shell                                           |

Everything after the first space is the command's argument, so names may
contain spaces. Unknown commands are reported and the shell carries on.
`cd ..` in the top folder stays where it is. `neofetch` shows `Unknown` for
each field when the shell is not running on Linux.

## Using it from Python

    import io
    from nmtshell.nodes import Folder, NodeType
    from nmtshell.commands import CommandHandler

    out = io.StringIO()
    shell = CommandHandler(Folder("~", None), out)
    shell.execute("mkdir docs")
    shell.execute("cd docs")
    shell.execute("pwd")
    print(out.getvalue())   # ~/docs

`CommandHandler.execute` returns `False` once `exit` has been run, and
`CommandHandler.current_path` gives the path of the current folder.

The tree can also be used on its own. `Folder.create(name, node_type)` adds
a `File` or `Folder` and raises `FileExistsError` if the name is taken.
`Folder.remove(name)` raises `FileNotFoundError` if there is no such entry.
`Folder.subfolder(name)` returns a direct subfolder or `None`.
`Folder.show_contents` and `Folder.show_all` call a display function with
the name, `NodeType` and depth of each entry. `nmtshell.display.show_node`
is such a function, and `format_node` gives the coloured line it writes.

## What it does not do

- It keeps nothing: the tree is lost when the shell exits.
- Files hold no data, so there is no `cat`, no writing to files and no `cp`.
- `cd` takes a single folder name, `..` or `~`. Paths with `/` are not
  understood, and neither are options on any command.