import pytest
from hypothesis import given, settings, strategies as st

from bignumkit.primes import (
    jacobi,
    next_prime,
    probably_prime,
    probably_prime_lucas,
    probably_prime_miller_rabin,
)

PRIMES = [
    "2",
    "3",
    "5",
    "7",
    "11",
    "13756265695458089029",
    "13496181268022124907",
    "10953742525620032441",
    "17908251027575790097",
    "18699199384836356663",
    "98920366548084643601728869055592650835572950932266967461790948584315647051443",
    "94560208308847015747498523884063394671606671904944666360068158221458669711639",
    "449417999055441493994709297093108513015373787049558499205492347871729927573118262811508386655998299074566974373711472560655026288668094291699357843464363003144674940345912431129144354948751003607115263071543163",
    "230975859993204150666423538988557839555560243929065415434980904258310530753006723857139742334640122533598517597674807096648905501653461687601339782814316124971547968912893214002992086353183070342498989426570593",
    "5521712099665906221540423207019333379125265462121169655563495403888449493493629943498064604536961775110765377745550377067893607246020694972959780839151452457728855382113555867743022746090187341871655890805971735385789993",
    "203956878356401977405765866929034577280193993314348263094772646453283062722701277632936616063144088173312372882677123879538709400158306567338328279154499698366071906766440037074217117805690872792848149112022286332144876183376326512083574821647933992961249917319836219304274280243803104015000563790123",
    "3618502788666131106986593281521497120414687020801267626233049500247285301239",
    "57896044618658097711785492504343953926634992332820282019728792003956564819949",
    "9850501549098619803069760025035903451269934817616361666987073351061430442874302652853566563721228910201656997576599",
    "42307582002575910332922579714097346549017899709713998034217522897561970639123926132812109468141778230245837569601494931472367",
    "6864797660130609714981900799081393217269435300143305409394463459185543183397656052122559640661454554977296311391480858037121987999716643812574028291115057151",
]


@pytest.mark.parametrize("prime", PRIMES)
@pytest.mark.parametrize("reps", [0, 5, 20])
def test_probabilistically_test_primes(prime, reps):
    assert probably_prime(int(prime, 10), reps)


@pytest.mark.parametrize("composite", [0, 1, 4, 9, 561, 2047, 1105, 3215031751])
def test_composites_rejected(composite):
    assert probably_prime(composite, 20) is False


def test_product_of_large_primes_rejected():
    p = int(PRIMES[5])
    q = int(PRIMES[6])
    assert probably_prime(p * q, 20) is False


def test_negative_rejected():
    with pytest.raises(ValueError):
        probably_prime(-7, 5)


def test_miller_rabin_base_two_strong_pseudoprime():
    # 2047 = 23 * 89 passes a single base-2 round.
    assert probably_prime_miller_rabin(2047, 1, True) is True
    assert probably_prime_miller_rabin(7919, 5, True) is True


def test_lucas_small_values():
    assert probably_prime_lucas(0) is False
    assert probably_prime_lucas(1) is False
    assert probably_prime_lucas(2) is False
    assert probably_prime_lucas(5) is True
    assert probably_prime_lucas(int(PRIMES[17])) is True


@pytest.mark.parametrize("n, expected", [(0, 2), (1, 2), (2, 3), (3, 5), (4, 5)])
def test_next_prime_small(n, expected):
    assert next_prime(n) == expected


@settings(max_examples=50, deadline=None)
@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_searching_next_prime(n):
    prime = next_prime(n)
    assert n < prime
    assert probably_prime(prime, 20)


@given(st.integers(min_value=-(10**6), max_value=10**6))
def test_jacobi_matches_euler_criterion(a):
    p = 7919
    euler = pow(a, (p - 1) // 2, p)
    expected = -1 if euler == p - 1 else euler
    assert jacobi(a, p) == expected


def test_jacobi_requires_odd_denominator():
    with pytest.raises(ValueError):
        jacobi(3, 10)


@given(st.integers(min_value=1, max_value=10**9).map(lambda v: 2 * v + 1))
def test_jacobi_of_one_is_one(y):
    assert jacobi(1, y) == 1