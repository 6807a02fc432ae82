"""
Core protocols for sciscript.

Structural interfaces that operation modules implement. Protocol
(structural typing) rather than ABC keeps backends decoupled from the
conversion/model core.
"""

from typing import Protocol, TypeVar, runtime_checkable

from sciscript.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design (a Matrix, or a domain design
    object) and produces a Result envelope. Backends are stateless, so
    one instance can serve concurrent callers.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_qr', 'cpu_svd', 'cpu_hessenberg'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalError: If the backend signals singularity or
                non-convergence
        """
        ...
