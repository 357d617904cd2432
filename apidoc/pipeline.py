"""Pipeline orchestration for documentation generation runs."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Optional, Union

from .config import (
    GenerationConfig,
    ResolvedConfig,
    apply_defaults,
    require_paths,
    resolve_config,
)
from .dedupe import resolve_duplication
from .discovery import FileDiscoverer
from .errors import ExtractionError
from .extractor import Extracted, Extractor, Fatal, Recoverable, read_package_metadata
from .factory import DocExtractorFactory, DocFactory
from .logging import debug_logging, get_logger
from .models import DocObject, GenerationResult, SourceAst
from .parsing import SourceParser
from .plugins import PluginHost
from .publisher import Publisher
from .synthetic import build_index_doc, build_package_doc


@dataclass
class PipelineContext:
    """State owned by one run and threaded through every stage."""

    host: PluginHost
    config: Optional[ResolvedConfig] = None
    docs: List[DocObject] = field(default_factory=list)
    asts: List[SourceAst] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    _ids: Iterator[int] = field(default_factory=itertools.count, init=False, repr=False)

    def add_doc(self, doc: DocObject) -> None:
        """Append ``doc``, assigning the next id in creation order."""
        doc.doc_id = next(self._ids)
        self.docs.append(doc)


class Generator:
    """Coordinates config handling, extraction, resolution, and publishing."""

    def __init__(
        self,
        parser: SourceParser | None = None,
        factory: DocExtractorFactory = DocFactory,
    ) -> None:
        self.parser = parser
        self.factory = factory
        self.logger = get_logger("pipeline")

    def run(self, config: Union[GenerationConfig, Mapping[str, object]]) -> GenerationResult:
        """Generate documentation for ``config`` and return the published docs."""
        if not isinstance(config, GenerationConfig):
            config = GenerationConfig.from_mapping(config)
        require_paths(config)

        context = PipelineContext(host=PluginHost())
        context.host.init(config.plugins)
        context.host.on_start()

        apply_defaults(config)
        config = context.host.on_handle_config(config)
        context.config = resolve_config(config)
        with debug_logging(context.config.debug):
            return self._generate(context)

    def _generate(self, context: PipelineContext) -> GenerationResult:
        assert context.config is not None
        self.logger.info(
            "Generating docs for %s into %s", context.config.source, context.config.destination
        )

        self._extract_sources(context)
        self._add_synthetic_docs(context)

        docs = resolve_duplication(context.docs)
        self.logger.debug("%d docs after duplicate resolution", len(docs))
        docs = context.host.on_handle_docs(docs)

        publisher = Publisher(context.config.destination, context.host)
        publisher.dump_docs(docs)
        publisher.dump_asts(context.asts)
        publisher.publish()

        context.host.on_complete()
        if context.skipped:
            self.logger.warning("Skipped %d file(s) with syntax errors", len(context.skipped))
        return GenerationResult(docs=docs, asts=list(context.asts), skipped=list(context.skipped))

    def _extract_sources(self, context: PipelineContext) -> None:
        config = context.config
        assert config is not None
        package_name, main_file_path = read_package_metadata(config.package)

        extractor = Extractor(context.host, self.parser, self.factory)
        discoverer = FileDiscoverer(config.source, config.includes, config.excludes)
        for file_path in discoverer:
            outcome = extractor.extract(config.source, file_path, package_name, main_file_path)
            if isinstance(outcome, Recoverable):
                context.skipped.append(str(file_path))
                continue
            if isinstance(outcome, Fatal):
                raise ExtractionError(
                    file_path,
                    f"extractor failed on {outcome.node.type} node at line "
                    f"{outcome.node.start_point[0] + 1}: {outcome.cause}",
                ) from outcome.cause

            assert isinstance(outcome, Extracted)
            for doc in outcome.docs:
                context.add_doc(doc)
            relative_path = file_path.relative_to(discoverer.root).as_posix()
            context.asts.append(SourceAst(relative_path=relative_path, tree=outcome.tree))

    def _add_synthetic_docs(self, context: PipelineContext) -> None:
        config = context.config
        assert config is not None
        if config.index:
            context.add_doc(build_index_doc(config.index))
        if config.package:
            context.add_doc(build_package_doc(config.package))


def generate(
    config: Union[GenerationConfig, Mapping[str, object]],
    *,
    parser: SourceParser | None = None,
    factory: DocExtractorFactory = DocFactory,
) -> GenerationResult:
    """Run one documentation generation pass."""
    return Generator(parser=parser, factory=factory).run(config)


__all__ = ["Generator", "PipelineContext", "generate"]
