"""
Battle system package.
- models.py (creature templates/instances, roster, battle state)
- mechanics.py (damage rolls, type matchups)
- capture.py (capture and escape odds)
- engine.py (turn sequencing and deferred resolution steps)
"""
