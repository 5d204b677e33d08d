"""Configuration loading from CLI and programmatic sources."""

import logging
from pathlib import Path
from dataclasses import replace
from resemblance.config.settings import (
    Settings, ShingleOptions, ClusteringSettings, LoggingSettings,
    LogLevel, EvaluationMethod, DEFAULT_N
)
from resemblance.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

class ConfigurationLoader:
    """Loads configuration from CLI args and system defaults."""

    def load_from_cli_args(self, args) -> Settings:
        """Load configuration from CLI arguments."""
        try:
            settings = self.load_defaults()

            shingle_updates = {}
            if getattr(args, 'n', None) is not None:
                shingle_updates['n'] = args.n
            if getattr(args, 'method', None):
                shingle_updates['evaluation_method'] = EvaluationMethod.coerce(args.method)
            if getattr(args, 'no_variable_n', False):
                shingle_updates['use_variable_n'] = False
            if getattr(args, 'strict', False):
                shingle_updates['strict'] = True

            clustering_updates = {}
            if getattr(args, 'clusters', None) is not None:
                clustering_updates['cluster_count'] = args.clusters
            if getattr(args, 'threshold', None) is not None:
                clustering_updates['r_threshold'] = args.threshold

            logging_updates = {}
            if getattr(args, 'log_dir', None):
                logging_updates['log_dir'] = Path(args.log_dir)
            if getattr(args, 'debug', False):
                logging_updates['level'] = LogLevel.DEBUG

            corpus = getattr(args, 'corpus', None)

            return replace(
                settings,
                shingles=replace(settings.shingles, **shingle_updates),
                clustering=replace(settings.clustering, **clustering_updates),
                logging=replace(settings.logging, **logging_updates),
                corpus_path=Path(corpus) if corpus else None,
                debug_mode=getattr(args, 'debug', False),
                show_progress=not getattr(args, 'no_progress', False),
            )

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Failed to load configuration from CLI arguments: {str(e)}"
            ) from e

    def load_defaults(self) -> Settings:
        """Load default configuration settings."""
        return Settings(
            shingles=ShingleOptions(
                n=DEFAULT_N,
                use_variable_n=True,
                evaluation_method=EvaluationMethod.NGRAPH,
            ),
            clustering=ClusteringSettings(
                cluster_count=5,
                r_threshold=0.2,
                random_state=0,
            ),
            logging=LoggingSettings(
                level=LogLevel.WARNING,
                log_dir=None,
                console_output=True,
            ),
            corpus_path=None,
            debug_mode=False,
            show_progress=True,
        )

def configure_from_cli(args) -> Settings:
    """Main entry point to configure settings from CLI args."""
    loader = ConfigurationLoader()
    settings = loader.load_from_cli_args(args)
    settings.validate()
    return settings
