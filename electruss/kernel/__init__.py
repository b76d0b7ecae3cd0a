# electruss/kernel - Assembly and solve core
"""
KERNEL: THE NUMERICAL CORE
==========================

The kernel does not know about Node or Member objects. It only needs:
- A way to map (node ordinal, local_dof) → global DOF index
- Element stiffness matrices with their DOF maps
- Restraint flags per node
- A load vector

Element maths (direction cosines, 4x4 truss stiffness, axial force) lives in
``electruss.elements``; the pipeline that wires everything together lives in
``electruss.analysis``.
"""

from .dof import DOFManager, DOF_2D_TRUSS
from .assemble import assemble_global_K, assemble_load_vector
from .solve import gauss_solve, solve_linear, PIVOT_TOLERANCE

__all__ = [
    'DOFManager',
    'DOF_2D_TRUSS',
    'assemble_global_K',
    'assemble_load_vector',
    'gauss_solve',
    'solve_linear',
    'PIVOT_TOLERANCE',
]
