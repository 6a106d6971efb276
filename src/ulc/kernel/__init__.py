"""Term model and rewriting kernel for the untyped lambda calculus."""
