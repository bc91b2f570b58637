"""`v23` command line: env, run, paths."""
