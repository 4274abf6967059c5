from find_gcd.main import main

main()
