"""Service layer: integers in, bytes out.

A request names a service and carries a ``/``-delimited argument string,
e.g. ``/apsp/0/1/1/0``. ``ServiceRouter.dispatch`` parses the arguments,
enforces the configured size ceilings, runs the algorithm and returns a
``Response`` whose body is sent verbatim. Rejected input raises an
``EngineError`` subclass from ``dispatch``; ``ServiceRouter.handle`` turns
those into plain-text error responses.

Available services:
    sort   - ascending order, space-separated decimal text
    sortb  - ascending order, 16-bit big-endian words
    sqrt   - floor square root of one integer, decimal text
    min    - minimum as a 16-bit word (0 for no input)
    3sum   - indices of the first triple summing to the target
    apsp   - all-pairs shortest distances, 16-bit row-major
    sp     - lightest path of exactly k edges under weight W
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from intgraph.algorithms.apsp import floyd_warshall
from intgraph.algorithms.bounded import bounded_edge_shortest_path
from intgraph.algorithms.three_sum import three_sum
from intgraph.codec import encode16, encode16_many, pack_index_pair
from intgraph.config import DEFAULT_CONFIG, EngineConfig
from intgraph.errors import EngineError, InvalidInputError
from intgraph.logging import get_logger
from intgraph.model.matrix import WeightMatrix, matrix_dimension

LOGGER = get_logger(__name__)

TEXT_PLAIN = "text/plain"
OCTET_STREAM = "application/octet-stream"

_TOKEN_RE = re.compile(r"^\s*[+-]?\d+\s*$")


@dataclass(frozen=True)
class Response:
    """Service output handed back to the transport unchanged.

    Attributes:
        status: HTTP-style status code (200, 400 or 404).
        content_type: MIME type of ``body``.
        body: Payload bytes; may be empty.
    """

    status: int
    content_type: str
    body: bytes

    @property
    def ok(self) -> bool:
        return self.status == 200


def parse_sequence(args: str, max_length: Optional[int] = None) -> List[int]:
    """Parse a ``/``-delimited list of decimal integers.

    Args:
        args: Text such as ``"3/-1/20"``. The empty string is the empty list.
        max_length: Optional ceiling on the number of integers.

    Returns:
        Parsed integers in order.

    Raises:
        InvalidInputError: If a token is not a decimal integer, or there are
            more than `max_length` tokens.
    """
    if args == "":
        return []
    tokens = args.split("/")
    if max_length is not None and len(tokens) > max_length:
        raise InvalidInputError(
            f"Sequence of {len(tokens)} integers exceeds the limit of {max_length}"
        )
    values: List[int] = []
    for position, token in enumerate(tokens):
        if not _TOKEN_RE.match(token):
            raise InvalidInputError(f"Invalid input: token {position} is {token!r}")
        try:
            values.append(int(token))
        except ValueError as exc:
            # int() refuses inputs past the interpreter's digit limit
            raise InvalidInputError(f"Invalid input: token {position}: {exc}") from exc
    return values


def split_request_path(path: str) -> Tuple[str, str]:
    """Split ``/service/args...`` into ``(service, args)``.

    Examples:
        >>> split_request_path("/apsp/0/1/1/0")
        ('apsp', '0/1/1/0')
        >>> split_request_path("/min")
        ('min', '')
    """
    path = path.split("?", 1)[0].lstrip("/")
    service, _, args = path.partition("/")
    return service, args


Handler = Callable[[str], Response]


class ServiceRouter:
    """Dispatches named services with limits taken from an `EngineConfig`."""

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._services: Dict[str, Tuple[Handler, str]] = {
            "sort": (self._sort, "Sort integers; space-separated text"),
            "sortb": (self._sort_binary, "Sort integers; 16-bit big-endian"),
            "sqrt": (self._sqrt, "Integer square root of one integer; text"),
            "min": (self._min, "Minimum of integers; 16-bit big-endian"),
            "3sum": (
                self._three_sum,
                f"Indices of three integers summing to {config.three_sum_target}",
            ),
            "apsp": (self._apsp, "All-pairs shortest distances of an n*n matrix"),
            "sp": (self._sp, "Lightest k-edge path: k/W/matrix"),
        }

    @property
    def services(self) -> Dict[str, str]:
        """Service names mapped to one-line descriptions."""
        return {name: desc for name, (_, desc) in self._services.items()}

    def dispatch(self, service: str, args: str) -> Response:
        """Run `service` on `args`.

        Raises:
            KeyError: If the service is unknown.
            EngineError: If the arguments are rejected.
        """
        try:
            handler, _ = self._services[service]
        except KeyError:
            raise KeyError(f"Unknown service: {service!r}") from None
        LOGGER.debug("Dispatching %s(%r)", service, args)
        return handler(args)

    def handle(self, path: str) -> Response:
        """Serve a request path, rendering failures as error responses."""
        service, args = split_request_path(path)
        try:
            return self.dispatch(service, args)
        except KeyError:
            LOGGER.warning("Unknown service requested: %r", service)
            return Response(404, TEXT_PLAIN, f"Unknown service: {service}".encode())
        except EngineError as exc:
            LOGGER.warning("Rejected %s request: %s", service, exc)
            return Response(400, TEXT_PLAIN, f"Error: {exc}".encode())

    # Individual services

    def _values(self, args: str) -> List[int]:
        return parse_sequence(args, max_length=self.config.max_sequence_length)

    def _matrix(self, values: List[int]) -> WeightMatrix:
        n = matrix_dimension(len(values))
        if n > self.config.max_vertices:
            raise InvalidInputError(
                f"Matrix of {n} vertices exceeds the limit of "
                f"{self.config.max_vertices}"
            )
        return WeightMatrix.from_sequence(values, max_weight=self.config.max_weight)

    def _sort(self, args: str) -> Response:
        values = sorted(self._values(args))
        return Response(200, TEXT_PLAIN, " ".join(map(str, values)).encode())

    def _sort_binary(self, args: str) -> Response:
        values = sorted(self._values(args))
        return Response(200, OCTET_STREAM, encode16_many(values))

    def _sqrt(self, args: str) -> Response:
        values = parse_sequence(args)
        if len(values) != 1:
            raise InvalidInputError(f"Expected one integer, got {len(values)}")
        if values[0] < 0:
            raise InvalidInputError(f"Cannot take square root of {values[0]}")
        return Response(200, TEXT_PLAIN, str(math.isqrt(values[0])).encode())

    def _min(self, args: str) -> Response:
        values = self._values(args)
        return Response(200, OCTET_STREAM, encode16(min(values, default=0)))

    def _three_sum(self, args: str) -> Response:
        triples = three_sum(self._values(args), self.config.three_sum_target)
        if not triples:
            return Response(200, OCTET_STREAM, b"")
        a, b, c = triples[0].indices
        return Response(200, OCTET_STREAM, pack_index_pair(a, b) + encode16(c))

    def _apsp(self, args: str) -> Response:
        result = floyd_warshall(self._matrix(self._values(args)))
        return Response(200, OCTET_STREAM, encode16_many(result.flat_distances()))

    def _sp(self, args: str) -> Response:
        values = self._values(args)
        if len(values) < 2:
            raise InvalidInputError("Expected k/W followed by a weight matrix")
        edge_count, max_weight = values[0], values[1]
        if edge_count > self.config.max_edge_count:
            raise InvalidInputError(
                f"Edge count {edge_count} exceeds the limit of "
                f"{self.config.max_edge_count}"
            )
        matrix = self._matrix(values[2:])
        result = bounded_edge_shortest_path(matrix, edge_count, max_weight)
        return Response(200, OCTET_STREAM, encode16_many(result.path))
