"""
Integration tests for the catalog endpoints.
"""


class TestCatalogApi:
    """Test listing, creating and repricing catalog entries."""

    def test_list_catalog(self, client):
        data = client.get('/catalog').get_json()

        assert [p['code'] for p in data['products']] == ['A', 'B', 'C', 'D']
        assert [p['code'] for p in data['promotions']] == ['PA', 'PC']

    def test_create_product(self, client):
        response = client.post('/catalog/products', json={'code': 'E', 'price': 3.5})

        assert response.status_code == 201
        assert response.get_json() == {'code': 'E', 'price': '3.50'}

        client.post('/cart/scan', json={'codes': 'EE'})
        assert client.get('/cart').get_json()['total'] == '7.00'

    def test_money_fields_quantized(self, client):
        """Test prices with more than two decimals are rounded in every response."""
        response = client.post('/catalog/products', json={'code': 'E', 'price': '0.333'})
        assert response.get_json()['price'] == '0.33'

        client.post('/cart/scan', json={'codes': 'EEE'})
        data = client.get('/cart').get_json()

        item = data['items'][0]
        assert item['amount'] == '3'
        assert item['price'] == '0.33'
        assert item['total'] == '1.00'
        assert item['discount'] == '0.00'
        assert item['products'][0]['product']['price'] == '0.33'
        assert data['total'] == '1.00'

        catalog = client.get('/catalog').get_json()
        assert {'code': 'E', 'price': '0.33'} in catalog['products']

    def test_create_product_invalid(self, client):
        response = client.post('/catalog/products', json={'code': 'E', 'price': -3})

        assert response.status_code == 400
        assert response.get_json()['status'] == 'error'

    def test_create_promotion(self, client):
        """Test a new promotion is picked up by the optimizer."""
        response = client.post('/catalog/promotions', json={
            'code': 'PB',
            'products': [{'code': 'B', 'amount': 2}],
            'price': 20,
        })
        assert response.status_code == 201

        client.post('/cart/scan', json={'codes': 'BB'})
        assert client.get('/cart').get_json()['total'] == '20.00'

    def test_create_promotion_with_full_products(self, client):
        response = client.post('/catalog/promotions', json={
            'code': 'PD',
            'products': [{'product': {'code': 'D', 'price': 0.15}, 'amount': 10}],
            'price': 1,
        })

        assert response.status_code == 201
        assert response.get_json()['products'][0]['amount'] == '10'

    def test_create_promotion_unknown_product(self, client):
        response = client.post('/catalog/promotions', json={
            'code': 'PZ',
            'products': [{'code': 'Z', 'amount': 1}],
            'price': 1,
        })

        assert response.status_code == 404

    def test_set_product_price(self, client):
        response = client.put('/catalog/products/A/price', json={'price': 3})

        assert response.status_code == 200
        assert response.get_json()['price'] == '3.00'

        client.post('/cart/scan', json={'codes': 'A'})
        assert client.get('/cart').get_json()['total'] == '3.00'

    def test_set_promotion_price(self, client):
        response = client.put('/catalog/promotions/PA/price', json={'price': 6})

        assert response.status_code == 200

        client.post('/cart/scan', json={'codes': 'AAAA'})
        assert client.get('/cart').get_json()['total'] == '6.00'

    def test_set_price_unknown_code(self, client):
        assert client.put('/catalog/products/Z/price', json={'price': 1}).status_code == 404
        assert client.put('/catalog/promotions/PZ/price', json={'price': 1}).status_code == 404

    def test_set_price_invalid(self, client):
        assert client.put('/catalog/products/A/price', json={}).status_code == 400
        assert client.put('/catalog/products/A/price', json=[1]).status_code == 400
