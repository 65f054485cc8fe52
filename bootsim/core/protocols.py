"""
Core protocols for bootsim.

Backends are matched structurally (Protocol) rather than by inheritance,
so an alternative resampling engine only has to provide `name` and
`solve()`.
"""

from typing import Protocol, TypeVar, runtime_checkable

P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a frozen, validated design and produces a Result
    envelope around a domain payload. Backends are stateless: everything
    they need, including the random generator, arrives through the design
    or the call.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_beta_sample', 'cpu_null_bootstrap'
        """
        ...

    def solve(self, design: D, rng) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Domain-specific validated design
            rng: numpy.random.Generator supplying all randomness

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
