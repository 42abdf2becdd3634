"""Agent exports."""

from .extraction_prompts import build_prompt
from .extractor_agent import ExtractionPipeline, PipelineStage, log_pipeline_error, run_extraction

__all__ = ["ExtractionPipeline", "PipelineStage", "build_prompt", "log_pipeline_error", "run_extraction"]
