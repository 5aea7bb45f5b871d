#    __init__.py
#        The PrioritySet engine, its ordering policy, iterators and views
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet
