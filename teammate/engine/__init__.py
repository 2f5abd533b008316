"""Team formation engine.

Sub-modules:
- allocator          – phased greedy split of a pool into full teams
- formation_analysis – leadership / thinker / diversity summary of formed teams
"""
