"""Emotional content of consumer complaints versus dispute outcomes."""

from .pipeline import PipelineResult, run_emotion_pipeline, run_from_file

__all__ = ['PipelineResult', 'run_emotion_pipeline', 'run_from_file']
