from dataclasses import dataclass, asdict


__all__ = ["DrawingConfig", "DEFAULT_CONFIG"]


@dataclass(frozen=True)
class DrawingConfig:
    """
    Visual constants used when drawing phasors, dimensions and sine diagrams.
    """
    # Fraction of a phasor (or length dimension) where the separately drawn
    # arrow head begins; the shaft is drawn over the full length.
    head_fraction: float = 0.999

    # Angular resolution of angular dimension arcs.
    arc_step_deg: float = 2.0

    # The arrow heads of an arc are short segments that are (nearly)
    # tangential to the arc at its ends.
    arc_head_angle_factor: float = 0.98
    arc_head_length: float = 0.01

    # Number of samples per half turn of the circle and sine wave in
    # `phasorsine`.
    samples_per_half_turn: int = 500

    # Line width of the dotted guide lines in `phasorsine`.
    dash_linewidth: float = 0.6

    # Radial position of the right-angle dot, relative to the arc radius.
    dot90_radius_fraction: float = 0.5

    def __str__(self) -> str:
        d = asdict(self)
        return "\n".join(f"{k}: {v}" for k, v in d.items())


DEFAULT_CONFIG = DrawingConfig()
