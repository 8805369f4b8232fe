"""Infrastructure layer — definition store, git subprocess, workspace.

This layer depends on stdlib and third-party libs (GitPython).
It must never import from services, commands, or output.
"""
