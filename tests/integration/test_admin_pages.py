"""Integration tests for the server-rendered options page and its forms."""

import pytest

from tests.helpers.token_factory import create_access_token
from translation_stats.auth.nonce import create_nonce

pytestmark = pytest.mark.asyncio

OPTION = "tstats_settings"
PAGE = "/admin/translation-stats"


class TestOptionsPageAccess:
    async def test_admin_sees_page(self, admin_client):
        resp = await admin_client.get("/options-general.php", params={"page": "translation-stats"})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        body = resp.text
        assert "<h1>Translation Stats</h1>" in body
        assert "Customize the translation stats you want to show." in body
        for anchor in ('href="#plugins"', 'href="#settings"', 'href="#tools"'):
            assert anchor in body
        assert 'name="tstats_nonce_check"' in body
        assert 'value="Save Changes"' in body

    async def test_page_renders_default_values(self, admin_client):
        body = (await admin_client.get(PAGE)).text
        assert 'name="settings[show_warnings]" value="1" checked' in body
        assert '<option value="site-default" selected>' in body
        assert '<option value="86400" selected>1 day</option>' in body
        assert 'name="settings[settings_version]" value="1.0"' in body
        assert 'name="plugins[akismet][enabled]"' in body

    async def test_page_renders_sidebar_widget(self, admin_client):
        body = (await admin_client.get(PAGE)).text
        assert 'id="tstats_settings_metabox__about"' in body
        assert "utm_campaign=tstats_link_faq" in body
        assert "v.1.1.2" in body

    async def test_editor_is_denied(self, editor_client):
        resp = await editor_client.get(PAGE)
        assert resp.status_code == 403
        assert "You do not have sufficient permissions to access this page." in resp.text
        assert "Save Changes" not in resp.text

    async def test_anonymous_is_unauthorized(self, client):
        resp = await client.get(PAGE)
        assert resp.status_code == 401

    async def test_unknown_page_slug_404(self, admin_client):
        resp = await admin_client.get("/options-general.php", params={"page": "other"})
        assert resp.status_code == 404

    async def test_security_headers(self, admin_client):
        resp = await admin_client.get(PAGE)
        assert resp.headers["x-frame-options"] == "DENY"
        assert "no-store" in resp.headers["cache-control"]
        assert "x-request-id" in resp.headers


class TestToolsActions:
    async def test_reset_settings(self, admin_client, admin_nonce, option_repo):
        option_repo.values[OPTION] = {"settings": {"show_warnings": False}}

        resp = await admin_client.post(
            PAGE, data={"reset_settings": "1", "tstats_nonce_check": admin_nonce}
        )

        assert resp.status_code == 200
        assert "Settings restored successfully." in resp.text
        assert option_repo.values[OPTION]["settings"]["show_warnings"] is True

    async def test_reset_without_nonce_is_blocked(self, admin_client, option_repo):
        option_repo.values[OPTION] = {"settings": {"show_warnings": False}}

        resp = await admin_client.post(PAGE, data={"reset_settings": "1"})

        assert resp.status_code == 403
        assert "Sorry, your nonce did not verify." in resp.text
        assert option_repo.values[OPTION] == {"settings": {"show_warnings": False}}

    async def test_delete_transients(self, admin_client, admin_nonce, transient_store):
        await transient_store.set("translation_stats_plugin_akismet", {"pt_PT": 98}, 3600)

        resp = await admin_client.post(
            PAGE, data={"delete_transients": "1", "tstats_nonce_check": admin_nonce}
        )

        assert resp.status_code == 200
        assert "Cache cleaned successfully." in resp.text
        assert await transient_store.get("translation_stats_plugin_akismet") is None

    async def test_delete_transients_with_stale_user_nonce(
        self, admin_client, editor_user, transient_store
    ):
        await transient_store.set("translation_stats_plugin_akismet", 1)
        nonce = create_nonce("tstats_action", editor_user.id)

        resp = await admin_client.post(
            PAGE, data={"delete_transients": "1", "tstats_nonce_check": nonce}
        )

        assert resp.status_code == 403
        assert await transient_store.get("translation_stats_plugin_akismet") == 1

    async def test_editor_cannot_reset_even_with_nonce(self, editor_client, editor_user, option_repo):
        nonce = create_nonce("tstats_action", editor_user.id)
        resp = await editor_client.post(
            PAGE, data={"reset_settings": "1", "tstats_nonce_check": nonce}
        )
        assert resp.status_code == 403
        assert option_repo.values == {}


class TestSaveSettings:
    async def test_save_redirects_and_persists(self, admin_client, admin_nonce, option_repo):
        resp = await admin_client.post(
            "/options.php",
            data={
                "tstats_nonce_check": admin_nonce,
                "settings[translation_language]": "pt_PT",
                "settings[transients_expiration]": "604800",
                "settings[settings_version]": "1.0",
                "plugins[hello-dolly][enabled]": "1",
            },
        )

        assert resp.status_code == 303
        assert resp.headers["location"] == (
            "/options-general.php?page=translation-stats&settings-updated=true"
        )
        stored = option_repo.values[OPTION]
        assert stored["settings"]["translation_language"] == "pt_PT"
        assert stored["settings"]["transients_expiration"] == 604800
        assert stored["settings"]["show_warnings"] is False
        assert stored["plugins"]["hello-dolly"]["enabled"] is True

    async def test_saved_notice_after_redirect(self, admin_client):
        resp = await admin_client.get(
            "/options-general.php",
            params={"page": "translation-stats", "settings-updated": "true"},
        )
        assert "Settings saved." in resp.text

    async def test_save_without_nonce_is_blocked(self, admin_client, option_repo):
        resp = await admin_client.post(
            "/options.php", data={"settings[translation_language]": "pt_PT"}
        )
        assert resp.status_code == 403
        assert OPTION not in option_repo.values

    async def test_editor_cannot_save(self, editor_client, editor_user, option_repo):
        nonce = create_nonce("tstats_action", editor_user.id)
        resp = await editor_client.post(
            "/options.php",
            data={"tstats_nonce_check": nonce, "settings[translation_language]": "pt_PT"},
        )
        assert resp.status_code == 403
        assert OPTION not in option_repo.values


class TestCookieAuthentication:
    async def test_session_cookie_opens_page(self, client, admin_user):
        token = create_access_token(user_id=admin_user.id, role="administrator")
        client.cookies.set("tstats_token", token)

        resp = await client.get(PAGE)

        assert resp.status_code == 200
        assert "<h1>Translation Stats</h1>" in resp.text
        client.cookies.clear()

    async def test_nonce_is_not_an_access_token(self, client, admin_nonce):
        resp = await client.get(PAGE, headers={"Authorization": f"Bearer {admin_nonce}"})
        assert resp.status_code == 401


class TestMultipartNonce:
    async def test_nonce_sent_as_file_is_rejected(self, admin_client, admin_nonce, option_repo):
        option_repo.values[OPTION] = {"settings": {"show_warnings": False}}

        resp = await admin_client.post(
            PAGE,
            data={"reset_settings": "1"},
            files={"tstats_nonce_check": ("nonce.txt", admin_nonce.encode(), "text/plain")},
        )

        assert resp.status_code == 403
        assert "Sorry, your nonce did not verify." in resp.text
        assert option_repo.values[OPTION] == {"settings": {"show_warnings": False}}

    async def test_save_with_nonce_as_file_is_rejected(self, admin_client, admin_nonce, option_repo):
        resp = await admin_client.post(
            "/options.php",
            data={"settings[translation_language]": "pt_PT"},
            files={"tstats_nonce_check": ("nonce.txt", admin_nonce.encode(), "text/plain")},
        )

        assert resp.status_code == 403
        assert OPTION not in option_repo.values

    async def test_multipart_form_with_text_nonce_works(self, admin_client, admin_nonce, option_repo):
        resp = await admin_client.post(
            PAGE,
            data={"reset_settings": "1", "tstats_nonce_check": admin_nonce},
            files={"attachment": ("notes.txt", b"ignored", "text/plain")},
        )

        assert resp.status_code == 200
        assert "Settings restored successfully." in resp.text
        assert OPTION in option_repo.values


class TestRequestId:
    async def test_incoming_request_id_is_echoed(self, client):
        resp = await client.get("/health", headers={"X-Request-ID": "req-abc-123"})
        assert resp.headers["x-request-id"] == "req-abc-123"

    async def test_non_utf8_request_id_is_replaced(self, client):
        resp = await client.get("/health", headers={"X-Request-ID": b"\xff\xfe\xfd"})

        assert resp.status_code == 200
        request_id = resp.headers["x-request-id"]
        assert len(request_id) == 32
        int(request_id, 16)

    async def test_overlong_request_id_is_replaced(self, client):
        resp = await client.get("/health", headers={"X-Request-ID": "r" * 200})
        assert len(resp.headers["x-request-id"]) == 32
