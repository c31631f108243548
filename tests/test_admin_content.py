import json
import os

from highlandgames.config import DEFAULT_LAT, DEFAULT_LNG


def _exists_everywhere(image_dirs, reference):
    filename = os.path.basename(reference)
    return [os.path.exists(os.path.join(d, filename)) for d in image_dirs]


def test_admin_routes_require_admin(app, client, services):
    assert client.get('/api/admin/registrations').status_code == 401
    assert client.post('/api/admin/events', json={'name': 'X'}).status_code == 401

    services.auth.signup('morag', 'morag@example.com', 'secret')
    client.post('/api/login', json={'username': 'morag', 'password': 'secret'})
    assert client.get('/api/admin/registrations').status_code == 403


def test_create_event_defaults_coordinates(admin_client):
    response = admin_client.post('/api/admin/events', json={'name': 'Caber Toss', 'description': 'Logs'})
    assert response.status_code == 201
    item = response.get_json()['item']
    assert item['lat'] == DEFAULT_LAT
    assert item['lng'] == DEFAULT_LNG
    assert item['event_date'] == ''

    response = admin_client.post('/api/admin/events', json={'name': 'Hammer Throw', 'lat': 'abc', 'lng': '-4.5'})
    item = response.get_json()['item']
    assert item['lat'] == DEFAULT_LAT
    assert item['lng'] == -4.5


def test_create_requires_name_or_title(admin_client):
    assert admin_client.post('/api/admin/events', json={'description': 'no name'}).status_code == 400
    assert admin_client.post('/api/admin/slides', json={'subtitle': 'no title'}).status_code == 400
    assert admin_client.post('/api/admin/heritage', json={}).status_code == 400


def test_duplicate_event_name_is_a_server_error(admin_client, make_event):
    make_event('Caber Toss')
    response = admin_client.post('/api/admin/events', json={'name': 'Caber Toss'})
    assert response.status_code == 500
    assert 'UNIQUE' in response.get_json()['error']


def test_partial_update_keeps_omitted_fields(admin_client, client, make_event):
    event = make_event('Caber Toss', description='Old', image='/images/a.png', event_date='2025-07-12',
                       event_time='11:00', location='Main Arena', lat=55.9, lng=-4.3)

    response = admin_client.put(f'/api/admin/events/{event.id}', json={'description': 'New'})
    assert response.status_code == 200

    stored = client.get(f'/api/events/{event.id}').get_json()
    assert stored == {
        'id': event.id,
        'name': 'Caber Toss',
        'description': 'New',
        'image': '/images/a.png',
        'event_date': '2025-07-12',
        'event_time': '11:00',
        'location': 'Main Arena',
        'lat': 55.9,
        'lng': -4.3,
    }


def test_null_fields_count_as_omitted(admin_client, client, make_event):
    event = make_event('Caber Toss', location='Main Arena')
    admin_client.put(f'/api/admin/events/{event.id}', json={'location': None, 'event_time': '12:00'})

    stored = client.get(f'/api/events/{event.id}').get_json()
    assert stored['location'] == 'Main Arena'
    assert stored['event_time'] == '12:00'


def test_update_with_unparseable_coordinate_resets_to_centre(admin_client, client, make_event):
    event = make_event('Caber Toss', lat=56.0, lng=-4.0)
    admin_client.put(f'/api/admin/events/{event.id}', json={'lat': 'north'})

    stored = client.get(f'/api/events/{event.id}').get_json()
    assert stored['lat'] == DEFAULT_LAT
    assert stored['lng'] == -4.0


def test_update_and_delete_unknown_id(admin_client):
    for kind in ('events', 'slides', 'heritage'):
        assert admin_client.put(f'/api/admin/{kind}/999', json={'description': 'x'}).status_code == 404
        assert admin_client.delete(f'/api/admin/{kind}/999').status_code == 404


def test_replacing_image_removes_old_file(admin_client, make_event, make_image, image_dirs):
    old = make_image('old.png')
    new = make_image('new.png')
    event = make_event('Caber Toss', image=old)

    response = admin_client.put(f'/api/admin/events/{event.id}', json={'image': new})
    assert response.status_code == 200

    assert _exists_everywhere(image_dirs, old) == [False, False]
    assert _exists_everywhere(image_dirs, new) == [True, True]


def test_same_image_is_not_deleted(admin_client, make_event, make_image, image_dirs):
    image = make_image('keep.png')
    event = make_event('Caber Toss', image=image)

    admin_client.put(f'/api/admin/events/{event.id}', json={'image': image, 'name': 'Caber Toss II'})
    admin_client.put(f'/api/admin/events/{event.id}', json={'description': 'no image key'})

    assert _exists_everywhere(image_dirs, image) == [True, True]


def test_delete_removes_image(admin_client, client, make_event, make_image, image_dirs):
    image = make_image('gone.png')
    event = make_event('Caber Toss', image=image)

    response = admin_client.delete(f'/api/admin/events/{event.id}')
    assert response.status_code == 200
    assert client.get(f'/api/events/{event.id}').status_code == 404
    assert _exists_everywhere(image_dirs, image) == [False, False]


def test_delete_with_missing_file_is_not_an_error(admin_client, make_event):
    event = make_event('Caber Toss', image='/images/never-existed.png')
    assert admin_client.delete(f'/api/admin/events/{event.id}').status_code == 200


def test_external_image_urls_are_never_deleted(admin_client, make_event, make_image, image_dirs):
    local = make_image('photo.png')
    event = make_event('Caber Toss', image='https://cdn.example.com/images/photo.png')

    admin_client.put(f'/api/admin/events/{event.id}', json={'image': '/images/other.png'})
    assert _exists_everywhere(image_dirs, local) == [True, True]


def test_slide_crud(admin_client, client, make_image, image_dirs):
    image = make_image('slide.png')
    response = admin_client.post('/api/admin/slides', json={
        'title': 'Welcome', 'subtitle': 'To the games', 'button_text': 'Register', 'action': 'Register',
        'image': image,
    })
    slide_id = response.get_json()['item']['id']

    admin_client.put(f'/api/admin/slides/{slide_id}', json={'subtitle': 'Updated'})
    slides = client.get('/api/slides').get_json()
    assert slides == [{
        'id': slide_id, 'title': 'Welcome', 'subtitle': 'Updated', 'button_text': 'Register',
        'action': 'Register', 'image': image,
    }]

    assert admin_client.delete(f'/api/admin/slides/{slide_id}').status_code == 200
    assert client.get('/api/slides').get_json() == []
    assert _exists_everywhere(image_dirs, image) == [False, False]


def test_heritage_crud(admin_client, client, make_image, image_dirs):
    old = make_image('clan.png')
    response = admin_client.post('/api/admin/heritage', json={'title': 'Clans', 'description': 'History',
                                                               'image': old})
    item_id = response.get_json()['item']['id']

    admin_client.put(f'/api/admin/heritage/{item_id}', json={'image': ''})
    items = client.get('/api/heritage').get_json()
    assert items[0]['image'] == ''
    assert items[0]['description'] == 'History'
    assert _exists_everywhere(image_dirs, old) == [False, False]


def test_registration_status_transitions(admin_client, client, make_event):
    make_event('Caber Toss')
    client.post('/api/register', json={'name': 'A', 'email': 'a@x.com', 'eventName': 'Caber Toss'})
    registration_id = admin_client.get('/api/admin/registrations').get_json()[0]['id']

    response = admin_client.put(f'/api/admin/registrations/{registration_id}', json={'status': 'approved'})
    assert response.status_code == 200
    assert response.get_json()['registration']['status'] == 'approved'

    assert admin_client.put(f'/api/admin/registrations/{registration_id}',
                            json={'status': 'maybe'}).status_code == 400
    assert admin_client.put('/api/admin/registrations/999', json={'status': 'rejected'}).status_code == 404

    rows = client.get('/api/check-status?email=a@x.com').get_json()
    assert rows[0]['status'] == 'approved'


def test_admin_mutation_requires_csrf_token_when_enabled(app, admin_client):
    app.config['WTF_CSRF_ENABLED'] = True

    response = admin_client.post('/api/admin/events', json={'name': 'Caber Toss'})
    assert response.status_code == 400

    token = admin_client.get('/api/csrf-token').get_json()['csrfToken']
    response = admin_client.post('/api/admin/events', json={'name': 'Caber Toss'},
                                 headers={'X-CSRFToken': token})
    assert response.status_code == 201


def test_heritage_delete_removes_image(admin_client, client, make_image, image_dirs):
    image = make_image('tartan.png')
    response = admin_client.post('/api/admin/heritage', json={'title': 'Tartans', 'image': image})
    item_id = response.get_json()['item']['id']

    assert admin_client.delete(f'/api/admin/heritage/{item_id}').status_code == 200
    assert client.get('/api/heritage').get_json() == []
    assert _exists_everywhere(image_dirs, image) == [False, False]


def test_non_finite_or_out_of_range_coordinates_fall_back(admin_client, client, make_event):
    admin_client.post('/api/admin/events', json={'name': 'Caber Toss', 'lat': 'inf', 'lng': '-1e999'})
    admin_client.post('/api/admin/events', json={'name': 'Hammer Throw', 'lat': 'nan', 'lng': 200})
    event = make_event('Tug of War', lat=91, lng=-4.3)
    admin_client.put(f'/api/admin/events/{event.id}', json={'lng': 'Infinity'})

    response = client.get('/api/events')
    events = json.loads(response.get_data(as_text=True), parse_constant=_reject_constant)
    assert [(e['lat'], e['lng']) for e in events] == [
        (DEFAULT_LAT, DEFAULT_LNG),
        (DEFAULT_LAT, DEFAULT_LNG),
        (DEFAULT_LAT, DEFAULT_LNG),
    ]


def _reject_constant(name):
    raise ValueError(f"invalid JSON constant {name}")
