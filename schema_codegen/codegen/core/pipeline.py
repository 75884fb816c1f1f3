"""
Generation pipeline: parse, derive the type model, write model and codec files.

Each stage returns a GenerationResult; stages are chained with ``bind`` so
the first failure stops the run. Every stage outcome is reported to a sink.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, List, Protocol, Union

from .generator import CodeGenerator
from .model import TypeModel
from .result import GenerationResult
from .schema import JsonSchemaParser, SchemaDocument, SchemaSource
from ...logging_config import get_logger

PARSED_SCHEMA = "parsed schema"
GENERATED_MODEL = "generated object model"
MODEL_FILES = "model files"
SERIALIZATION_FILES = "serialization files"
GENERATED_FILES = "generated files"

ModelDeriver = Callable[[SchemaDocument], GenerationResult[Iterable[TypeModel]]]


class Sink(Protocol):
    """Receives pipeline observations."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...


class LoggerSink:
    """Sink writing to a stdlib logger."""

    def __init__(self, logger: logging.Logger = None):
        self.logger = logger or get_logger(__name__)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)


class NullSink:
    """Sink that discards everything."""

    def info(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def debug(self, message: str) -> None:
        pass


class GenerationPipeline:
    """Runs a schema source through parsing, derivation and file emission."""

    def __init__(
        self,
        generator: CodeGenerator,
        deriver: ModelDeriver,
        parser: JsonSchemaParser = None,
        sink: Sink = None,
    ):
        """
        Initialize pipeline.

        Args:
            generator: Language generator emitting model and codec files
            deriver: Builds the type model from a parsed document
            parser: Schema parser; a JsonSchemaParser honouring the
                generator's number kind by default
            sink: Observability sink; nothing is reported when omitted
        """
        self.generator = generator
        self.deriver = deriver
        self.parser = parser or JsonSchemaParser(generator.config.number_kind)
        self.sink = sink or NullSink()

    def run(
        self, source: SchemaSource, output_dir: Union[str, Path]
    ) -> GenerationResult[List[Path]]:
        """
        Generate model and codec files for a schema source.

        Returns:
            GenerationResult with the model paths followed by the codec paths
        """
        output_dir = Path(output_dir)
        document = self._report(PARSED_SCHEMA, self.parser.parse(source))
        return document.bind(lambda doc: self._derive(doc, output_dir)).tap(
            on_success=lambda paths: self.sink.info(
                f"{GENERATED_FILES} : {self._format_paths(paths)}"
            )
        )

    def _derive(
        self, document: SchemaDocument, output_dir: Path
    ) -> GenerationResult[List[Path]]:
        models = self._report(GENERATED_MODEL, self.deriver(document).map(list))
        return models.bind(lambda types: self._emit(types, document.scope, output_dir))

    def _emit(
        self, types: List[TypeModel], scope: str, output_dir: Path
    ) -> GenerationResult[List[Path]]:
        self.sink.debug(f"{len(types)} type model entities for scope {scope!r}")
        model_files = self._report(
            MODEL_FILES, self.generator.generate_model(types, scope, output_dir)
        )
        return model_files.bind(
            lambda model_paths: self._report(
                SERIALIZATION_FILES,
                self.generator.generate_codec(types, scope, output_dir),
            ).map(lambda codec_paths: list(model_paths) + list(codec_paths))
        )

    def _report(self, label: str, result: GenerationResult[Any]) -> GenerationResult[Any]:
        if result.success:
            self.sink.info(f"{label} : {result}")
        else:
            self.sink.error(f"{label} : {result}")
        return result

    @staticmethod
    def _format_paths(paths: List[Path]) -> str:
        return ", ".join(str(p) for p in paths)
