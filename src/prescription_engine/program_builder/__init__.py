"""Program builder — turns a training coordinate into an ordered prescription."""

from prescription_engine.program_builder.assembler import PrescriptionAssembler
from prescription_engine.program_builder.day_types import classify
from prescription_engine.program_builder.warmup import sequence_warmup

__all__ = ["PrescriptionAssembler", "classify", "sequence_warmup"]
