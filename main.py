from dnsreconcile import RecordSpec, client_factory, ensure_absent, ensure_present



def main():
    # Example run against the in-memory stub; drop "mock" to talk to Route 53
    config = {"region_name": "us-east-1", "mock": True}
    client = client_factory(config)

    spec = RecordSpec(
        name="www.example.com",
        type="A",
        ttl=300,
        values=["192.168.1.2"],
        overwrite=True,
    )

    print(f"First run: {ensure_present(spec, 'Z123EXAMPLE', client)}")
    print(f"Second run: {ensure_present(spec, 'Z123EXAMPLE', client)}")
    print(f"Delete: {ensure_absent(spec, 'Z123EXAMPLE', client)}")

if __name__ == "__main__":
    main()
