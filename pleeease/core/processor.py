"""Processing pipeline: parse, run plugins, stringify."""

import logging
from typing import Any, Mapping, Optional, Union

from .options import Options
from .stylesheet import Stylesheet
from .validator import check_syntax
from ..plugins.factory import PluginFactory, default_factory
from ..utils.error import ProcessingError
from ..utils.file import read_file_async, write_file_async

logger = logging.getLogger(__name__)

MISSING_INPUT = 'CSS string or stylesheet was not provided to process()'


class Processor:
    """Run stylesheets through the plugins enabled by a set of options."""

    def __init__(self, options: Optional[Mapping[str, Any]] = None,
                 config: Optional[Mapping[str, Any]] = None,
                 factory: Optional[PluginFactory] = None):
        """Initialize processor.

        Args:
            options: Caller options
            config: Options read from a configuration file
            factory: Plugin registry, built-in plugins by default

        Raises:
            ConfigError: If the options are inconsistent
        """
        self.factory = factory or default_factory()
        self._resolver = Options(config)
        self.options = self._resolver.extend(options)

    def set_options(self, options: Optional[Mapping[str, Any]]) -> dict:
        """Update the options; keys not given keep their current value."""
        self.options = self._resolver.update(options)
        return self.options

    def source_name(self) -> Optional[str]:
        sourcemaps = self.options.get('sourcemaps')
        if isinstance(sourcemaps, Mapping) and sourcemaps.get('from'):
            return sourcemaps['from']
        return self.options.get('in')

    def parse(self, css: Union[str, Stylesheet, None]) -> Stylesheet:
        """Turn input into a stylesheet, running the preprocessor first.

        Raises:
            ProcessingError: If no input is given
            CssSyntaxError: If the stylesheet is malformed
        """
        if css is None:
            raise ProcessingError(MISSING_INPUT)
        if isinstance(css, Stylesheet):
            return css
        if not isinstance(css, str):
            raise ProcessingError(f"{MISSING_INPUT}, got {type(css).__name__}")

        stylesheet = Stylesheet(css, self.source_name())
        preprocessor = self.factory.create_preprocessor(self.options)
        if preprocessor is not None:
            stylesheet = preprocessor.run(stylesheet)

        check_syntax(stylesheet.css, stylesheet.source)
        return stylesheet

    def transform(self, stylesheet: Stylesheet) -> Stylesheet:
        for plugin in self.factory.create_plugins(self.options):
            stylesheet = plugin.run(stylesheet)
        return stylesheet

    def stringify(self, stylesheet: Stylesheet) -> str:
        return stylesheet.css

    def process(self, css: Union[str, Stylesheet, None]) -> str:
        """Process a CSS string or stylesheet and return the resulting CSS."""
        result = self.stringify(self.transform(self.parse(css)))
        logger.debug(f"Processed {self.source_name() or 'input'}")
        return result


def process(css: Union[str, Stylesheet, None],
            options: Optional[Mapping[str, Any]] = None,
            config: Optional[Mapping[str, Any]] = None) -> str:
    """Process CSS with a one-off :class:`Processor`."""
    return Processor(options, config=config).process(css)


async def compile_file(in_path: str, out_path: Optional[str] = None,
                       options: Optional[Mapping[str, Any]] = None,
                       config: Optional[Mapping[str, Any]] = None) -> str:
    """Process a CSS file, optionally writing the result.

    Args:
        in_path: File to read
        out_path: File to write, if any
        options: Caller options; ``in``/``out`` default to the paths
        config: Options read from a configuration file

    Returns:
        str: Resulting CSS
    """
    options = dict(options or {})
    options.setdefault('in', in_path)
    if out_path:
        options.setdefault('out', out_path)

    processor = Processor(options, config=config)
    css = await read_file_async(in_path)
    result = processor.process(css)

    if out_path:
        await write_file_async(out_path, result)
        logger.info(f"CSS saved to {out_path}")
    return result


__all__ = ['Processor', 'process', 'compile_file', 'MISSING_INPUT']
