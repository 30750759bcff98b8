from rps_desktop.app import main

main()
