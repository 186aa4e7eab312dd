from django.apps import AppConfig


class VitemanifestConfig(AppConfig):
    name = "vitemanifest"
    verbose_name = "Vite manifest"
