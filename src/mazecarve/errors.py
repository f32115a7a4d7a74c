# src/mazecarve/errors.py
# Every failure the engine reports is recoverable at the call site:
# retry with another seed, fix the mask, or recompute distances.


class MazeError(Exception):
    pass


class OutOfBoundsError(MazeError, IndexError):
    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"({x},{y}) is outside a {size}x{size} maze")
        self.x, self.y, self.size = x, y, size


class MazeStateError(MazeError):
    """An operation would break a maze invariant (e.g. a wall into a masked cell)."""


class MaskedCellError(MazeStateError):
    pass


class ValidationError(MazeError):
    """A precondition failed before any carving happened."""


class EmptyMaskError(ValidationError):
    pass


class DisconnectedMaskError(ValidationError):
    def __init__(self, islands: int):
        super().__init__(f"unmasked cells form {islands} disconnected regions; need exactly 1")
        self.islands = islands


class MaskShapeError(ValidationError, ValueError):
    """A mask file or array does not describe a size x size grid."""


class InvalidSizeError(ValidationError, ValueError):
    pass


class UnsupportedMaskError(ValidationError):
    pass


class UnknownAlgorithmError(ValidationError):
    pass


class GenerationError(MazeError):
    """Carving could not reach full coverage; indicates a bug, not bad input."""


class InconsistentDistanceError(MazeError):
    pass
