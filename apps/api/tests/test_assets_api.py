"""Non-fungible asset registry API tests."""

from __future__ import annotations

import os
import unittest

from fastapi.testclient import TestClient

from chimera.core.config import get_settings
from chimera.main import create_app

CREATOR = {"Authorization": "Bearer test:creator"}
USER1 = {"Authorization": "Bearer test:user1"}

FIRST_MEDIA_URI = "http://swarm.blockscan.com/bzz:/43ec1080b3d36aea6653b888de1ff16e8884d3ea95f22ffee68a394e114e571b"
SECOND_MEDIA_URI = "http://swarm.blockscan.com/bzz:/b4a45796dbb19eea0c4dc0c27dfb6521d550c1433640eac6791569ef9cd28f9a"


class _SettingsEnvCase(unittest.TestCase):
    _env_keys = (
        "CHIMERA_NETWORK",
        "CHIMERA_DEPLOY_SECRET",
    )

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env_keys}
        for key in self._env_keys:
            os.environ.pop(key, None)
        get_settings.cache_clear()
        self.app = create_app()
        self.client = TestClient(self.app)
        deployed = self.client.post(
            "/api/v1/ledgers",
            headers=CREATOR,
            json={"name": "Picasso token", "symbol": "PIC", "decimals": 0, "total_supply": 1000},
        )
        self.assertEqual(deployed.status_code, 201)
        self.address = deployed.json()["address"]
        self.assets_path = f"/api/v1/ledgers/{self.address}/assets"

    def tearDown(self) -> None:
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()

    def add_first_asset(self) -> dict:
        response = self.client.post(
            self.assets_path,
            headers=CREATOR,
            json={"id": 1, "title": "Les Demoiselles d'Avignon", "media_uri": FIRST_MEDIA_URI},
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()


class AssetRegistryApiTests(_SettingsEnvCase):
    def test_asset_text_fields_are_trimmed(self) -> None:
        response = self.client.post(
            self.assets_path,
            headers=CREATOR,
            json={"id": 1, "title": "  Guernica ", "media_uri": f" {FIRST_MEDIA_URI} "},
        )
        self.assertEqual(response.status_code, 201)

        appended = self.client.post(f"{self.assets_path}/1/media-uris", headers=CREATOR, json={"media_uri": f"{SECOND_MEDIA_URI}  "})
        self.assertEqual(appended.status_code, 200)

        asset = self.client.get(f"{self.assets_path}/1").json()
        self.assertEqual(asset["title"], "Guernica")
        self.assertEqual(asset["media_uris"], [FIRST_MEDIA_URI, SECOND_MEDIA_URI])

    def test_add_asset_counts_and_emits_add_asset(self) -> None:
        receipt = self.add_first_asset()

        self.assertEqual(receipt["logs"][0]["event"], "AddAsset")
        self.assertEqual(receipt["logs"][0]["args"]["_id"], 1)
        ledger = self.client.get(f"/api/v1/ledgers/{self.address}").json()
        self.assertEqual(ledger["num_assets"], 1)

        asset = self.client.get(f"{self.assets_path}/1")
        self.assertEqual(asset.status_code, 200)
        self.assertEqual(
            asset.json(),
            {"id": 1, "title": "Les Demoiselles d'Avignon", "media_uris": [FIRST_MEDIA_URI]},
        )

    def test_add_media_uri_to_existing_asset_emits_event(self) -> None:
        self.add_first_asset()

        response = self.client.post(f"{self.assets_path}/1/media-uris", headers=CREATOR, json={"media_uri": FIRST_MEDIA_URI})

        self.assertEqual(response.status_code, 200)
        log = response.json()["logs"][0]
        self.assertEqual(log["event"], "AddMediaUri")
        self.assertEqual(log["args"], {"_id": 1, "_mediaUri": FIRST_MEDIA_URI})
        asset = self.client.get(f"{self.assets_path}/1").json()
        self.assertEqual(asset["media_uris"], [FIRST_MEDIA_URI, FIRST_MEDIA_URI])

    def test_add_media_uri_to_missing_asset_reverts_without_state_change(self) -> None:
        self.add_first_asset()
        events_before = self.client.get(f"/api/v1/ledgers/{self.address}/events").json()

        response = self.client.post(f"{self.assets_path}/2/media-uris", headers=CREATOR, json={"media_uri": SECOND_MEDIA_URI})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["code"], "UNKNOWN_ASSET_ID")
        self.assertEqual(response.json()["details"], {"reverted": True, "asset_id": 2})
        self.assertEqual([asset["id"] for asset in self.client.get(self.assets_path).json()], [1])
        self.assertEqual(self.client.get(f"{self.assets_path}/1").json()["media_uris"], [FIRST_MEDIA_URI])
        self.assertEqual(self.client.get(f"/api/v1/ledgers/{self.address}/events").json(), events_before)

    def test_duplicate_asset_id_is_rejected(self) -> None:
        self.add_first_asset()

        response = self.client.post(
            self.assets_path,
            headers=CREATOR,
            json={"id": 1, "title": "Guernica", "media_uri": SECOND_MEDIA_URI},
        )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["code"], "DUPLICATE_ASSET_ID")
        self.assertEqual(self.client.get(f"{self.assets_path}/1").json()["title"], "Les Demoiselles d'Avignon")
        self.assertEqual(self.client.get(f"/api/v1/ledgers/{self.address}").json()["num_assets"], 1)

    def test_assets_are_listed_by_id(self) -> None:
        for asset_id, title in ((3, "Guernica"), (1, "The Old Guitarist"), (2, "Weeping Woman")):
            response = self.client.post(
                self.assets_path,
                headers=CREATOR,
                json={"id": asset_id, "title": title, "media_uri": FIRST_MEDIA_URI},
            )
            self.assertEqual(response.status_code, 201)

        listed = self.client.get(self.assets_path)
        self.assertEqual(listed.status_code, 200)
        self.assertEqual([asset["id"] for asset in listed.json()], [1, 2, 3])
        self.assertEqual(self.client.get(f"/api/v1/ledgers/{self.address}").json()["num_assets"], 3)

    def test_only_ledger_creator_administers_assets(self) -> None:
        self.add_first_asset()

        add = self.client.post(
            self.assets_path,
            headers=USER1,
            json={"id": 2, "title": "Guernica", "media_uri": SECOND_MEDIA_URI},
        )
        append = self.client.post(f"{self.assets_path}/1/media-uris", headers=USER1, json={"media_uri": SECOND_MEDIA_URI})

        for response in (add, append):
            with self.subTest(path=response.request.url.path):
                self.assertEqual(response.status_code, 409)
                self.assertEqual(response.json()["code"], "CALLER_NOT_OWNER")
        self.assertEqual(self.client.get(f"/api/v1/ledgers/{self.address}").json()["num_assets"], 1)

    def test_missing_asset_lookup_is_not_found(self) -> None:
        response = self.client.get(f"{self.assets_path}/9")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"code": "RESOURCE_NOT_FOUND", "message": "Resource not found"})

    def test_invalid_asset_payloads_are_rejected(self) -> None:
        for body in (
            {"id": True, "title": "Bool id", "media_uri": FIRST_MEDIA_URI},
            {"id": "1", "title": "String id", "media_uri": FIRST_MEDIA_URI},
            {"id": 1, "title": "   ", "media_uri": FIRST_MEDIA_URI},
            {"id": 1, "title": "Blank media", "media_uri": "  "},
            {"id": 0, "title": "Zero", "media_uri": FIRST_MEDIA_URI},
            {"id": 1, "title": "", "media_uri": FIRST_MEDIA_URI},
            {"id": 1, "title": "No media", "media_uri": ""},
        ):
            with self.subTest(body=body):
                response = self.client.post(self.assets_path, headers=CREATOR, json=body)
                self.assertEqual(response.status_code, 422)
        self.assertEqual(self.client.get(self.assets_path).json(), [])


if __name__ == "__main__":
    unittest.main()
