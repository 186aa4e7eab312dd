from django.core.exceptions import ImproperlyConfigured

from vitemanifest import ConfigurationError, Vite, ViteConfig, make_vite

from .base import ManifestTestCase


class MakeViteTests(ManifestTestCase):
    manifest = {
        "app.js": {"file": "app.123456.js", "integrity": "sha256-abc"},
        "app.css": {"file": "app.654321.css"},
    }

    def options(self, **extra):
        return {"public_dir": str(self.public_dir), **extra}

    def test_defaults(self):
        vite = make_vite()
        self.assertEqual(vite.config, ViteConfig())
        self.assertEqual(vite.hotfile, "public/hot")

    def test_plain_options(self):
        vite = make_vite(
            self.options(build_dir="dist", manifest_filename="m.json", hotfile="/tmp/hot-file")
        )
        self.assertEqual(vite.build_dir, "dist")
        self.assertEqual(vite.hotfile, "/tmp/hot-file")
        self.assertEqual(vite.manifest_path().name, "m.json")

    def test_none_rejected_for_directory_options(self):
        for key in ("build_dir", "public_dir", "manifest_filename"):
            with self.subTest(key=key), self.assertRaisesMessage(ConfigurationError, key):
                make_vite({key: None})

    def test_hotfile_none_restores_default(self):
        base = Vite(ViteConfig(hotfile="/tmp/custom-hot"))
        self.assertEqual(make_vite({"hotfile": None}, creator=lambda: base).hotfile, "public/hot")

    def test_empty_hotfile_is_kept(self):
        vite = make_vite(self.options(hotfile=""))
        self.assertEqual(vite.hotfile, "")
        self.assertFalse(vite.is_running_hot())

    def test_empty_nonce_is_kept(self):
        vite = make_vite(self.options(nonce="", integrity_key=False))
        self.assertEqual(vite.nonce, "")
        self.assertEqual(
            vite.render(["app.js"]), '<script type="module" src="build/app.123456.js" nonce=""></script>\n'
        )

    def test_explicit_nonce(self):
        self.assertEqual(make_vite({"nonce": "abc"}).nonce, "abc")

    def test_none_nonce_generates_random_value(self):
        nonce = make_vite({"nonce": None}).nonce
        self.assertEqual(len(nonce), 40)
        self.assertNotEqual(nonce, make_vite({"nonce": None}).nonce)

    def test_absent_nonce_stays_unset(self):
        self.assertIsNone(make_vite().nonce)

    def test_integrity_key_false(self):
        vite = make_vite(self.options(integrity_key=False))
        self.assertEqual(
            vite.render(["app.js"]), '<script type="module" src="build/app.123456.js"></script>\n'
        )

    def test_integrity_key_type_checked(self):
        with self.assertRaises(ConfigurationError):
            make_vite({"integrity_key": 5})

    def test_asset_path_resolver(self):
        vite = make_vite(self.options(asset_path_resolver=lambda path, context: f"/static/{path}"))
        self.assertEqual(vite.asset("app.js"), "/static/build/app.123456.js")

    def test_asset_path_resolver_must_be_callable(self):
        with self.assertRaises(ConfigurationError):
            make_vite({"asset_path_resolver": "not callable"})

    def test_single_callable_resolver(self):
        vite = make_vite(
            self.options(
                integrity_key=False,
                script_tag_attributes_resolvers=lambda src, url, chunk, manifest: {"defer": True},
            )
        )
        self.assertEqual(
            vite.render(["app.js"]), '<script type="module" src="build/app.123456.js" defer></script>\n'
        )

    def test_single_mapping_resolver(self):
        vite = make_vite(self.options(style_tag_attributes_resolvers={"media": "print"}))
        self.assertEqual(
            vite.render(["app.css"]), '<link rel="stylesheet" href="build/app.654321.css" media="print" />\n'
        )

    def test_resolver_list(self):
        vite = make_vite(
            self.options(
                integrity_key=False,
                script_tag_attributes_resolvers=[
                    lambda src, url, chunk, manifest: {"defer": True},
                    {"crossorigin": "anonymous"},
                ],
            )
        )
        self.assertEqual(
            vite.render(["app.js"]),
            '<script type="module" src="build/app.123456.js" defer crossorigin="anonymous"></script>\n',
        )

    def test_invalid_resolver_option(self):
        with self.assertRaises(ConfigurationError):
            make_vite({"script_tag_attributes_resolvers": 42})
        with self.assertRaises(ConfigurationError):
            make_vite({"style_tag_attributes_resolvers": [{"media": "all"}, "nope"]})

    def test_unknown_option(self):
        with self.assertRaisesMessage(ConfigurationError, "buildDir"):
            make_vite({"buildDir": "dist"})

    def test_creator_instance_is_extended(self):
        base = Vite(ViteConfig(build_dir="dist", script_tag_attributes_resolvers=({"defer": True},)))
        vite = make_vite({"script_tag_attributes_resolvers": {"async": True}}, creator=lambda: base)
        self.assertEqual(vite.build_dir, "dist")
        self.assertEqual(len(vite.config.script_tag_attributes_resolvers), 2)
        self.assertEqual(len(base.config.script_tag_attributes_resolvers), 1)

    def test_creator_keeps_subclass(self):
        class CustomVite(Vite):
            pass

        self.assertIsInstance(make_vite({"nonce": "x"}, creator=CustomVite), CustomVite)

    def test_creator_must_return_vite(self):
        with self.assertRaisesMessage(ConfigurationError, "vitemanifest.vite.Vite"):
            make_vite(creator=lambda: object())

    def test_configuration_error_is_improperly_configured(self):
        with self.assertRaises(ImproperlyConfigured):
            make_vite({"integrity_key": None})
