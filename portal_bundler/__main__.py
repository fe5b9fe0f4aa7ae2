from portal_bundler.cli import main

main()
