from find_gcd.solution import find_gcd

A = 120
B = 48


def main():
    print(find_gcd(A, B))


if __name__ == "__main__":
    main()
