from __future__ import annotations

from typing import Optional

from flask import Flask

from deck_site.adapters.local_fs import LocalFileSystem
from deck_site.config.ini_config import IniConfig, SiteSettings
from deck_site.ports.filesystem import FileSystem
from deck_site.renderers.index_renderer import JinjaIndexRenderer
from deck_site.services.build_service import BuildService
from deck_site.services.favicon import FaviconProvisioner
from deck_site.services.manifest_service import ManifestBuilder
from deck_site.services.metadata_extractor import MetadataExtractor
from deck_site.services.verifier import BuildVerifier
from deck_site.web.routes import create_blueprint


def make_build_service(settings: SiteSettings, fs: Optional[FileSystem] = None) -> BuildService:
    fs = fs or LocalFileSystem()

    extractor = MetadataExtractor(
        source_extension=settings.source_extension,
        rendered_extension=settings.rendered_extension,
    )

    return BuildService(
        fs=fs,
        manifest_builder=ManifestBuilder(fs=fs, extractor=extractor),
        renderer=JinjaIndexRenderer(settings=settings),
        slides_dir=settings.slides_dir,
        output_dir=settings.output_dir,
        index_file=settings.index_file,
        favicon=FaviconProvisioner(fs=fs, source=settings.favicon_source, file_name=settings.favicon_file),
    )


def make_verifier(settings: SiteSettings, fs: Optional[FileSystem] = None) -> BuildVerifier:
    return BuildVerifier(
        fs=fs or LocalFileSystem(),
        output_dir=settings.output_dir,
        source_assets_dir=settings.source_assets_dir,
        required_files=settings.required_files,
        required_dirs=settings.required_dirs,
        required_assets=settings.required_assets,
        index_file=settings.index_file,
        favicon_file=settings.favicon_file,
        rendered_extension=settings.rendered_extension,
    )


def create_app(settings: Optional[SiteSettings] = None) -> Flask:
    """Preview server for the built output directory."""
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    app = Flask(__name__)
    app.register_blueprint(
        create_blueprint(
            output_dir=settings.output_dir,
            index_file=settings.index_file,
            verifier=make_verifier(settings),
        )
    )

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug

    return app
