# ipt/__init__.py
"""
IPT/EPUSP dosage package.

Keep this file side-effect free.
Do NOT import submodules here, otherwise importing any ipt.* module will
trigger those imports and can cause circular/import-order errors.
"""

__all__ = []
