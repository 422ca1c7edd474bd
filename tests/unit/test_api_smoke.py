"""
API Smoke Tests

Tests for the FastAPI endpoints:
1. GET /health returns ok
2. POST /tree/root returns the root commitment
3. POST /tree/proof returns a proof, 404 for absent identifiers
4. POST /verify accepts valid proofs and rejects others
5. Malformed input returns structured errors
"""

import pytest
from fastapi.testclient import TestClient

from api.app import app
from core.crypto.hashing import keccak256, to_hex
from core.merkle.merkle_proofs import MerkleProver

from fixtures import ABSENT_ADDRESS, ADDRESS_A, SCENARIO_ADDRESSES, make_hex_addresses


# Create test client
client = TestClient(app)


@pytest.fixture(autouse=True)
def _isolated(tmp_path, clean_env):
    """Keep config file lookup away from the developer's working tree."""
    clean_env.chdir(tmp_path)


class TestHealth:

    def test_health(self):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["ok"] is True
        assert response.json()["service"] == "merkle-allowlist-api"


class TestTreeRoot:

    def test_root(self):
        response = client.post("/tree/root", json={"identifiers": SCENARIO_ADDRESSES})
        data = response.json()

        assert response.status_code == 200
        assert data["root"] == MerkleProver.from_identifiers(SCENARIO_ADDRESSES).hex_root
        assert data["leaf_count"] == 3
        assert data["depth"] == 2

    def test_root_sha256(self):
        response = client.post(
            "/tree/root",
            json={"identifiers": SCENARIO_ADDRESSES, "hash_algorithm": "sha256"},
        )
        assert response.json()["hash_algorithm"] == "sha256"

    def test_unknown_algorithm(self):
        response = client.post(
            "/tree/root",
            json={"identifiers": SCENARIO_ADDRESSES, "hash_algorithm": "md5"},
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"

    def test_empty_identifiers(self):
        response = client.post("/tree/root", json={"identifiers": []})

        assert response.status_code == 400
        assert response.json()["ok"] is False
        assert response.json()["error"]["code"] == "EMPTY_INPUT"

    def test_bad_identifier(self):
        response = client.post("/tree/root", json={"identifiers": [ADDRESS_A, "xyz"]})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "IDENTIFIER_INVALID"


class TestTreeProof:

    def test_proof(self):
        response = client.post(
            "/tree/proof",
            json={"identifiers": SCENARIO_ADDRESSES, "identifier": ADDRESS_A},
        )
        data = response.json()

        assert response.status_code == 200
        assert len(data["proof"]) == 2
        assert data["index"] == 0

    def test_absent(self):
        response = client.post(
            "/tree/proof",
            json={"identifiers": SCENARIO_ADDRESSES, "identifier": ABSENT_ADDRESS},
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "LEAF_NOT_FOUND"


class TestVerify:

    def _membership(self, addresses=SCENARIO_ADDRESSES, identifier=ADDRESS_A):
        return client.post(
            "/tree/proof",
            json={"identifiers": addresses, "identifier": identifier},
        ).json()

    def test_valid(self):
        m = self._membership()
        response = client.post(
            "/verify", json={"leaf": m["leaf"], "proof": m["proof"], "root": m["root"]}
        )

        assert response.status_code == 200
        assert response.json()["valid"] is True

    def test_every_member_of_larger_list(self):
        addresses = make_hex_addresses(11)
        for address in addresses:
            m = self._membership(addresses, address)
            response = client.post(
                "/verify", json={"leaf": m["leaf"], "proof": m["proof"], "root": m["root"]}
            )
            assert response.json()["valid"] is True

    def test_other_root(self):
        m = self._membership()
        other = client.post("/tree/root", json={"identifiers": make_hex_addresses(3)}).json()

        response = client.post(
            "/verify", json={"leaf": m["leaf"], "proof": m["proof"], "root": other["root"]}
        )

        assert response.status_code == 200
        assert response.json()["valid"] is False

    def test_malformed_sibling(self):
        m = self._membership()
        response = client.post(
            "/verify",
            json={"leaf": m["leaf"], "proof": [m["proof"][0], "0x12"], "root": m["root"]},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MERKLE_PROOF_INVALID"
        assert response.json()["error"]["details"]["sibling_index"] == 1

    def test_wrong_leaf(self):
        m = self._membership()
        response = client.post(
            "/verify",
            json={"leaf": to_hex(keccak256(b"intruder")), "proof": m["proof"], "root": m["root"]},
        )
        assert response.json()["valid"] is False
