version = 0.1
minor_version = "0"
release_name = "Auckland"

release_version = f"{version}.{minor_version}"
