"""
Class roster console application.

Layers:
- domain: the Student record and the error taxonomy
- repositories: storage contract plus file, memory and SQL backends
- services: the menu-driven roster session
- ui: console I/O and presentation
- core: configuration and logging
"""
