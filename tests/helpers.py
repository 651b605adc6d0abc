import base64
import json

import httpx

from x402_autopay.config import SessionConfig
from x402_autopay.signer import WalletSigner

BASE_URL = "http://paid.test"
CONFIG = SessionConfig(
    private_key="0x" + "1" * 64,
    base_url=BASE_URL,
    endpoint_path="/mint-v2",
    chain="base",
)


def encode_header(data):
    return base64.b64encode(json.dumps(data).encode("utf-8")).decode("utf-8")


class SignerFactory:
    def __init__(self):
        self.calls = []

    async def __call__(self, chain, private_key):
        self.calls.append((chain, private_key))
        return WalletSigner(chain=chain, network="eip155:8453", address="0xabc", inner=None)


def mock_client_factory(handler):
    def factory(signer, base_url):
        return httpx.AsyncClient(base_url=base_url, transport=httpx.MockTransport(handler))

    return factory


def scripted(*answers):
    remaining = list(answers)
    questions = []

    async def prompt(question):
        questions.append(question)
        return remaining.pop(0).strip()

    prompt.questions = questions
    return prompt
