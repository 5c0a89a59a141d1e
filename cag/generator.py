"""
Chunked generation over inputs larger than a model's context window.

This module provides the ChunkedGenerator class, which splits text into
overlapping chunks, runs a prompt over each chunk on a fresh model session,
and combines the responses either in a single pass or by recursively
re-processing the combined output until it is short enough.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from cag.config.generation_config import GenerationConfig, validate_config, MAX_ITERATION_LIMIT
from cag.config.settings import get_settings
from cag.errors import ChunkProcessingFailure, MissingTerminationCriterion
from cag.interfaces import IModelProvider, ITextSplitter
from cag.llm_backends import provider_from_settings
from cag.prompts import PromptTemplate, template_registry
from cag.sessions import FailurePolicy, model_session, send_prompt
from cag.splitting import RecursiveSplitter
from cag.utils.logging import get_logger

# Hard ceiling on recursion when only the output length threshold is configured
MAX_RECURSION_DEPTH = MAX_ITERATION_LIMIT

RECURSIVE_SEPARATOR = " "

module_logger = get_logger(__name__)


class ChunkedGenerator:
    """
    Runs a prompt template over chunks of a long input.

    Two strategies share one split/process/combine skeleton:

    - ``generate_sequential`` processes each chunk once and joins the responses
      with ``config.sequential_separator``. Errors abort the call by default.
    - ``generate_recursive`` joins the responses with a space and, while the
      result is longer than ``iteration_output_token_limit``, feeds it back in
      as a new input. Chunks that fail are logged and skipped by default.

    Example:
        config = GenerationConfig(chunk_size=24576, chunk_overlap=200,
                                  iteration_limit=3, iteration_output_token_limit=1000)
        generator = ChunkedGenerator(config, "Summarize the following text: {text}")
        summary = await generator.generate_recursive(long_text)
    """

    def __init__(
        self,
        config: Union[GenerationConfig, Mapping[str, Any]],
        prompt_template: Union[str, PromptTemplate],
        provider: Optional[IModelProvider] = None,
        splitter: Optional[ITextSplitter] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the generator with configuration and dependencies.

        Args:
            config: Generation configuration, or a mapping of its fields
            prompt_template: Template string with a single {text} marker, or a PromptTemplate
            provider: Model provider; built from application settings when omitted
            splitter: Text splitter; a RecursiveSplitter over the configured sizes when omitted
            logger: Logger instance

        Raises:
            InvalidConfiguration: If the configuration or template is malformed
        """
        if not isinstance(config, GenerationConfig):
            config = GenerationConfig.from_dict(config)
        validate_config(config)
        self.config = config

        if not isinstance(prompt_template, PromptTemplate):
            prompt_template = PromptTemplate(prompt_template)
        self.prompt_template = prompt_template

        self.logger = logger or module_logger
        self.splitter = splitter or RecursiveSplitter(config.chunk_size, config.chunk_overlap)
        self.provider = provider or provider_from_settings()

        self.session_timeout = config.session_timeout
        if self.session_timeout is None:
            self.session_timeout = get_settings().session_timeout

    @classmethod
    def from_registry(
        cls,
        config: Union[GenerationConfig, Mapping[str, Any]],
        template_name: str,
        **kwargs
    ) -> 'ChunkedGenerator':
        """Create a generator using a template registered in the prompt registry."""
        return cls(config, template_registry.get(template_name), **kwargs)

    async def generate_sequential(
        self,
        text: str,
        failure_policy: FailurePolicy = FailurePolicy.FAIL_FAST
    ) -> str:
        """
        Process input text in a single pass over its chunks.

        Args:
            text: Long text input to process
            failure_policy: FAIL_FAST re-raises the first chunk error; SKIP_AND_LOG omits failed chunks

        Returns:
            Chunk responses, in input order, joined by the configured separator
        """
        chunks = self.splitter.split(text)
        self.logger.info(f"Sequential generation: {len(chunks)} chunks")

        output = await self._process_chunks(chunks, failure_policy)
        return self.config.sequential_separator.join(output)

    async def generate_recursive(
        self,
        text: str,
        iteration: int = 0,
        failure_policy: FailurePolicy = FailurePolicy.SKIP_AND_LOG
    ) -> str:
        """
        Process input text recursively, refining the combined output on each pass.

        Args:
            text: Long text input to process
            iteration: Number of passes already performed
            failure_policy: SKIP_AND_LOG omits failed chunks; FAIL_FAST re-raises the first chunk error

        Returns:
            The combined output of the last pass, or the input itself once the
            iteration limit has been reached

        Raises:
            MissingTerminationCriterion: If neither iteration_limit nor
                iteration_output_token_limit is configured
        """
        if not self.config.has_termination_criterion:
            raise MissingTerminationCriterion(
                "Either iteration_limit or iteration_output_token_limit must be set."
            )

        iteration_limit = self.config.iteration_limit
        if iteration_limit is not None and iteration >= iteration_limit:
            self.logger.info(f"Iteration limit of {iteration_limit} reached.")
            return text

        if iteration_limit is None and iteration >= MAX_RECURSION_DEPTH:
            self.logger.warning(
                f"Output still longer than {self.config.iteration_output_token_limit} characters "
                f"after {MAX_RECURSION_DEPTH} iterations; stopping."
            )
            return text

        chunks = self.splitter.split(text)
        self.logger.info(f"Iteration {iteration + 1}: {len(chunks)} chunks")

        output = await self._process_chunks(chunks, failure_policy)
        combined = RECURSIVE_SEPARATOR.join(output)
        self.logger.debug(f"Combined output (iteration {iteration + 1}): {combined}")

        token_limit = self.config.iteration_output_token_limit
        if token_limit is not None and len(combined) <= token_limit:
            self.logger.info(f"Output length {len(combined)} within limit of {token_limit}.")
            return combined

        return await self.generate_recursive(combined, iteration + 1, failure_policy)

    async def _process_chunks(self, chunks: List[str], failure_policy: FailurePolicy) -> List[str]:
        """Run the prompt over each chunk in order, one session per chunk."""
        output: List[str] = []
        for index, chunk in enumerate(chunks):
            self.logger.debug(f"Processing chunk {index + 1}/{len(chunks)}")
            try:
                response = await self._process_chunk(index, chunk)
            except Exception as e:
                if failure_policy is FailurePolicy.FAIL_FAST:
                    raise
                failure = ChunkProcessingFailure(
                    f"Error processing chunk {index + 1}/{len(chunks)}: {str(e)}",
                    chunk_index=index,
                    chunk=chunk
                )
                failure.__cause__ = e
                self.logger.error(str(failure), exc_info=failure)
                continue
            output.append(response)
        return output

    async def _process_chunk(self, index: int, chunk: str) -> str:
        prompt = self.prompt_template.format(chunk)
        async with model_session(self.provider, dict(self.config.session_options)) as session:
            response = await send_prompt(session, prompt, timeout=self.session_timeout, chunk_index=index)
        self.logger.debug(f"Response for chunk {index + 1}: {response}")
        return response
