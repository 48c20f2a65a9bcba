"""Visualization frame builder for the ``$v`` line protocol.

The implementation is chosen once, when the package is first imported:
``AHC_VDSL_VIS=0`` selects :mod:`ahc_vdsl.noop`, anything else selects
:mod:`ahc_vdsl.full`. Both expose the same names.
"""

from __future__ import annotations

from ahc_vdsl.config import vis_enabled

VIS_ENABLED = vis_enabled()

if VIS_ENABLED:
    from ahc_vdsl.full import *  # noqa: F403
    from ahc_vdsl.full import __all__ as _api
else:
    from ahc_vdsl.noop import *  # noqa: F403
    from ahc_vdsl.noop import __all__ as _api

__all__ = ["VIS_ENABLED", *_api]
