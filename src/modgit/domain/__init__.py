"""Domain layer — module model, resolution and visibility rules.

This layer depends only on the stdlib. Functions here are pure: the
definition store is reached through an injected entry source or lookup
callable, never imported directly.
"""
