from particleheart.app import main

main()
