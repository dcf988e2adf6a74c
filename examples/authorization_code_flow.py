import asyncio
import contextlib

from coreason_azure_oauth import AzureTenant, authorization_url, create_client


async def main() -> None:
    """
    Demonstrates the authorization code flow against a single Azure AD tenant.
    Includes:
    - Tenant provider built from the tenant's domain
    - PKCE authorization URL
    - Token exchange performed by Authlib against the tenant's token endpoint
    """
    provider = AzureTenant.new("contoso.onmicrosoft.com")
    print(f">>> Authority: {provider.authority()}")
    print(f">>> Discovery document: {provider.discovery_endpoint()}")

    async with create_client(
        provider,
        client_id="00000000-0000-0000-0000-000000000000",
        redirect_uri="http://localhost:8400/callback",
        scope="openid profile offline_access",
    ) as client:
        request = authorization_url(client, provider, prompt="select_account")
        print(f">>> Open in a browser: {request.url}")

        code = input(">>> Paste the 'code' parameter from the redirect: ").strip()
        try:
            token = await client.fetch_token(code=code, code_verifier=request.code_verifier.get_secret_value())
        except Exception as e:
            # Without a registered application the exchange is rejected by Azure
            print(f">>> Token exchange failed: {e}")
            return

        print(f">>> Access token expires at {token.get('expires_at')}")


if __name__ == "__main__":
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(main())
