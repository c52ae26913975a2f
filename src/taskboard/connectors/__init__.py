"""Front-ends: the console REPL and its text renderer."""
